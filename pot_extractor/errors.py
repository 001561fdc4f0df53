from .message import PluralTranslation, key


class ExtractorError(Exception):
    pass


class ConfigError(ExtractorError):
    pass


class MalformedCatalogFile(ExtractorError):
    def __init__(self, path, reason=""):
        self.path = path
        self.reason = reason
        super().__init__(path, reason)

    def __str__(self):
        if self.reason:
            return f"cannot parse {self.path}: {self.reason}"
        return f"cannot parse {self.path}"


class NonEmptyTemplateTranslation(ExtractorError):
    """Raised when a message in a template has a translated msgstr."""

    def __init__(self, message, path=None):
        self.message = message
        self.key = key(message)
        self.path = path
        super().__init__(message, path)

    def __str__(self):
        if isinstance(self.message, PluralTranslation):
            text = ("plural translation with msgid "
                    f"'{self.message.msgid}' and msgid_plural "
                    f"'{self.message.msgid_plural}' has a non-empty msgstr")
        else:
            text = (f"translation with msgid '{self.message.msgid}' "
                    "has a non-empty msgstr")
        if self.path:
            return f"{self.path}: {text}"
        return text
