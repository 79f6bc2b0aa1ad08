from stdnum.exceptions import InvalidFormat, InvalidChecksum, InvalidComponent


class PinManagerException(Exception):
    def __init__(self, msg, *args):
        super().__init__(msg.format(*args))


class InvArgException(PinManagerException):
    pass


class PinFormatError(PinManagerException, InvalidFormat):
    pass


class PinChecksumError(PinManagerException, InvalidChecksum):
    pass


class PinWrongSexError(PinManagerException, InvalidComponent):
    pass
