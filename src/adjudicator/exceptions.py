# ============================================================
# RULES EXCEPTIONS
# ============================================================

class AdjudicatorError(Exception):
    """Base exception for rules resolution errors"""
    pass


class ConfigurationError(AdjudicatorError, ValueError):
    """Rules data is malformed and cannot be resolved"""
    pass


class UnknownDegreeAdjustmentError(ConfigurationError):
    """A check DC names an adjustment direction that does not exist"""
    pass


class ModifierValidationError(ConfigurationError):
    """A modifier was built from an invalid value, kind or type"""
    pass
