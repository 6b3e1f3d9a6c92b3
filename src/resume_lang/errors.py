"""Exceptions raised while parsing resume-lang documents."""


class ResumeParseError(Exception):
    """Base exception for resume-lang parsing."""


class MalformedImportDirective(ResumeParseError):
    """`@import` target is not wrapped in double quotes."""


class ImportReadFailure(ResumeParseError):
    """The file reader could not provide an imported document."""

    def __init__(self, path: str):
        super().__init__(f"could not read imported document {path!r}")
        self.path = path


class ImportCycleError(ResumeParseError):
    """An imported document (transitively) imports itself."""

    def __init__(self, path: str):
        super().__init__(f"import cycle through {path!r}")
        self.path = path
