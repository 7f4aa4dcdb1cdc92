# SPDX-License-Identifier: MIT


class FeedError(ValueError):
    """Raised when an event feed cannot be read or is malformed."""
