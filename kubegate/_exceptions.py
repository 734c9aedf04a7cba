# SPDX-FileCopyrightText: Copyright (c) 2024, Kubegate Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License


class VersionParseError(ValueError):
    """Unable to parse a Kubernetes version string.

    Attributes:
        version: The input that failed to parse, exactly as it was given.
    """

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(f'could not parse "{version}" as version')
