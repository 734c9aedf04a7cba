# SPDX-FileCopyrightText: Copyright (c) 2024, Kubegate Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""
This module contains `kubegate`, a small library for deciding which Kubernetes APIs and
behaviors are available on a cluster from the version its API server reports.

Example:
    >>> import kubegate
    >>> kubegate.endpoint_slice_v1_promoted("v1.21.0-rc.0")
    True
"""
from ._constants import (
    KUBE_V1170_BETA2,
    KUBE_V1210_BETA1,
    KUBE_V1240_ALPHA4,
    THRESHOLDS,
)
from ._exceptions import VersionParseError
from ._gates import (
    endpoint_slice_v1_promoted,
    endpoint_slice_v1beta1_promoted,
    sa_token_auto_generated,
)

try:
    from ._version import version as __version__  # noqa
    from ._version import version_tuple as __version_tuple__  # noqa
except ImportError:
    __version__ = "0.0.0"
    __version_tuple__ = (0, 0, 0)

__all__ = [
    "__version__",
    "__version_tuple__",
    "KUBE_V1170_BETA2",
    "KUBE_V1210_BETA1",
    "KUBE_V1240_ALPHA4",
    "THRESHOLDS",
    "VersionParseError",
    "endpoint_slice_v1_promoted",
    "endpoint_slice_v1beta1_promoted",
    "sa_token_auto_generated",
]
