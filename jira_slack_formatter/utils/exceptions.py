class FormatterError(Exception):
    """Base exception for the Jira Slack formatter."""
    pass

class ConfigurationError(FormatterError):
    """Raised when there's an error in configuration."""
    pass

class UserMapError(FormatterError):
    """Raised when a username map can't be loaded or is malformed."""
    pass

class IssueFormatError(FormatterError):
    """Raised when an issue payload can't be read or lacks required fields."""
    pass

def handle_error(error: Exception) -> str:
    """Handle different types of errors and return appropriate messages."""
    if isinstance(error, ConfigurationError):
        return f"Configuration error: {str(error)}"
    elif isinstance(error, UserMapError):
        return f"User map error: {str(error)}"
    elif isinstance(error, IssueFormatError):
        return f"Issue error: {str(error)}"
    else:
        return f"Unexpected error: {str(error)}"
