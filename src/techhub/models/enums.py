from enum import Enum as PyEnum


# ------------------------------
# Framework classification
# ------------------------------
class Category(str, PyEnum):
    """Closed set of categories a framework can be filed under."""
    WEB_AUTOMATION = "WEB_AUTOMATION"
    MOBILE_AUTOMATION = "MOBILE_AUTOMATION"
    API_TESTING = "API_TESTING"
    PERFORMANCE_TESTING = "PERFORMANCE_TESTING"
    BACKEND_DEVELOPMENT = "BACKEND_DEVELOPMENT"
    FRONTEND_DEVELOPMENT = "FRONTEND_DEVELOPMENT"


class Language(str, PyEnum):
    """Primary programming language of a framework."""
    KOTLIN = "KOTLIN"
    JAVA = "JAVA"
    JAVASCRIPT = "JAVASCRIPT"
    TYPESCRIPT = "TYPESCRIPT"
    PYTHON = "PYTHON"
    GO = "GO"
    CSHARP = "CSHARP"
