class WhatIfTimeError(Exception):
    """Base class for library errors."""


class UnknownFieldError(WhatIfTimeError, KeyError):
    """A configuration field name outside the six unit multipliers."""


class UnknownUnitError(WhatIfTimeError, ValueError):
    """A unit key outside second/minute/hour/day/week/month/year."""


class ProjectFileError(WhatIfTimeError, ValueError):
    """A saved project file that cannot be read back."""
