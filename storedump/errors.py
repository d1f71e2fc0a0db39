class ConvertError(Exception):
    def __init__(self, message, path=None):
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self):
        if self.path is None:
            return self.message
        return "%s: %s" % (self.path, self.message)


class OpenError(ConvertError):
    pass


class MapNotFoundError(ConvertError):
    def __init__(self, map_name, path=None):
        super().__init__("no such map %r" % map_name, path)
        self.map_name = map_name


class DecodeError(ConvertError):
    def __init__(self, message, path=None, map_name=None, key=None):
        super().__init__(message, path)
        self.map_name = map_name
        self.key = key

    def __str__(self):
        where = ""
        if self.map_name is not None:
            where += "map %r" % self.map_name
        if self.key is not None:
            where += (", " if where else "") + "key %r" % self.key
        msg = "%s (%s)" % (self.message, where) if where else self.message
        if self.path is None:
            return msg
        return "%s: %s" % (self.path, msg)


class EmitError(ConvertError):
    pass
