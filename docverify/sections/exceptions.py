class SectionAnalysisError(Exception):
    """Base exception for section analysis errors."""


class SectionParseError(SectionAnalysisError):
    """Raised when a generated reply does not follow the section grammar."""
