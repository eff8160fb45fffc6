# SPDX-FileCopyrightText: 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>
# SPDX-License-Identifier: MPL-2.0

from __future__ import annotations

__copyright__ = "(C) 2025 Hidayat Trimarsanto <trimarsanto@gmail.com>"
__author__ = "trimarsanto@gmail.com"
__license__ = "MPL-2.0"


class SpecError(ValueError):

    def __init__(self, message: str, spec_type: str | None = None):
        """
        Raised when a field spec cannot be decoded or has no usable type.

        :param message: message to be shown
        :param spec_type: the spec type tag involved, if known
        """
        super().__init__(message)
        self.spec_type = spec_type


class DataError(ValueError):

    def __init__(self, message: str, spec_type: str | None = None):
        """
        Raised when a data mapping does not match the shape of its spec type.

        :param message: message to be shown
        :param spec_type: the spec type tag the data was checked against
        """
        super().__init__(message)
        self.spec_type = spec_type


# EOF
