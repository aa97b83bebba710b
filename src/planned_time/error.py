# SPDX-License-Identifier: MIT


class PlannedTimeError(Exception):
    """Base class for errors reported to the user as a single message."""


class MissingConfigError(PlannedTimeError):
    pass


class InvalidDateError(PlannedTimeError):
    pass


class ConflictingOptionsError(PlannedTimeError):
    pass


class RangeOrderError(PlannedTimeError):
    pass


class RangeTooLargeError(PlannedTimeError):
    pass


class UpstreamFetchError(PlannedTimeError):
    """Raised for transport failures, non-2xx responses and malformed bodies."""


class InvalidConfigError(PlannedTimeError):
    pass
