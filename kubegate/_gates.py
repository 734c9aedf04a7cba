# SPDX-FileCopyrightText: Copyright (c) 2024, Kubegate Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
"""Feature gates derived from the version reported by a Kubernetes API server.

Each gate answers whether the cluster has reached the release named in
:data:`kubegate.THRESHOLDS`. Reaching a threshold always means the new behavior
is in effect.
"""
from __future__ import annotations

import logging

from ._constants import THRESHOLDS
from ._kubeversion import KubeVersion

logger = logging.getLogger(__name__)


def _threshold_reached(version: str, name: str) -> bool:
    threshold = THRESHOLDS[name]
    reached = KubeVersion.parse(version) >= threshold
    logger.debug(
        "Version %s %s threshold %s (%s)",
        version,
        "has reached" if reached else "is below",
        threshold,
        name,
    )
    return reached


def sa_token_auto_generated(version: str) -> bool:
    """Check whether service account token secrets are still auto-generated.

    Clusters before 1.24.0-alpha.4 create a legacy secret-based token for every
    service account. Newer clusters require tokens to be requested explicitly.

    Args:
        version: The Kubernetes server version, e.g. ``"v1.23.6+k3s1"``.

    Returns:
        True if the cluster still auto-generates token secrets.

    Raises:
        VersionParseError: If ``version`` cannot be parsed.
    """
    return not _threshold_reached(version, "sa-token-auto-generation-removed")


def endpoint_slice_v1beta1_promoted(version: str) -> bool:
    """Check whether ``discovery.k8s.io/v1beta1`` EndpointSlices are served.

    Args:
        version: The Kubernetes server version.

    Returns:
        True for 1.17.0-beta.2 and later.

    Raises:
        VersionParseError: If ``version`` cannot be parsed.
    """
    return _threshold_reached(version, "endpoint-slice-v1beta1")


def endpoint_slice_v1_promoted(version: str) -> bool:
    """Check whether ``discovery.k8s.io/v1`` EndpointSlices are served.

    Args:
        version: The Kubernetes server version.

    Returns:
        True for 1.21.0-beta.1 and later.

    Raises:
        VersionParseError: If ``version`` cannot be parsed.
    """
    return _threshold_reached(version, "endpoint-slice-v1")
