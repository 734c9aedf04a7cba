# SPDX-FileCopyrightText: Copyright (c) 2024, Kubegate Developers (See LICENSE for list)
# SPDX-License-Identifier: BSD 3-Clause License
from types import MappingProxyType

from ._kubeversion import KubeVersion

# Legacy secret-based service account tokens are no longer auto-generated.
KUBE_V1240_ALPHA4 = KubeVersion.parse("1.24.0-alpha.4")
# discovery.k8s.io/v1beta1 EndpointSlice is served.
KUBE_V1170_BETA2 = KubeVersion.parse("1.17.0-beta.2")
# discovery.k8s.io/v1 EndpointSlice is served.
KUBE_V1210_BETA1 = KubeVersion.parse("1.21.0-beta.1")

THRESHOLDS = MappingProxyType(
    {
        "sa-token-auto-generation-removed": KUBE_V1240_ALPHA4,
        "endpoint-slice-v1beta1": KUBE_V1170_BETA2,
        "endpoint-slice-v1": KUBE_V1210_BETA1,
    }
)
