"""
Custom Exception Hierarchy for UTM projection

Structured errors so callers can tell a bad input coordinate from a bad zone
designation or a latitude the projection cannot handle. None of these derive
from ValueError: pydantic validators let them propagate unchanged.
"""


class UTMProjectionError(Exception):
    """Base exception for all projection related errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OutOfRangeCoordinateError(UTMProjectionError):
    """Raised when a coordinate component falls outside its valid range"""

    def __init__(self, field: str, value: float, minimum: float, maximum: float):
        message = f"{field} {value!r} outside valid range [{minimum}, {maximum}]"
        super().__init__(message)
        self.field = field
        self.value = value
        self.minimum = minimum
        self.maximum = maximum


class InvalidZoneError(UTMProjectionError):
    """Raised when a UTM zone number or latitude band letter is not recognised"""

    def __init__(self, zone_number=None, zone_letter=None, reason: str = None):
        if reason is None:
            reason = f"invalid UTM zone designation {zone_number!r}{zone_letter or ''}"
        super().__init__(reason)
        self.zone_number = zone_number
        self.zone_letter = zone_letter


class ProjectionDomainError(UTMProjectionError):
    """Raised when a latitude has no UTM latitude band (polar regions)"""

    def __init__(self, latitude: float):
        message = f"Latitude {latitude!r} outside UTM band range [-80, 84)"
        super().__init__(message)
        self.latitude = latitude


class ConfigurationError(UTMProjectionError):
    """Raised when projection settings are invalid"""

    def __init__(self, config_field: str, reason: str):
        message = f"Configuration error in {config_field}: {reason}"
        super().__init__(message)
        self.config_field = config_field
        self.reason = reason
