from spotctl.models.cloudspaces import (
    CloudSpace,
    CloudSpaceList,
    CloudSpaceSpec,
    CloudSpaceStatus,
    KubeconfigResponse,
)
from spotctl.models.common import DeleteResponse, ListMeta, ObjectMeta, SpotModel
from spotctl.models.nodepools import (
    Autoscaling,
    OnDemandNodePool,
    OnDemandNodePoolList,
    SpotNodePool,
    SpotNodePoolList,
    SpotNodePoolSpec,
)
from spotctl.models.organizations import Organization, OrganizationList
from spotctl.models.regions import Region, RegionList, RegionSpec
from spotctl.models.server_classes import ServerClass, ServerClassList
from spotctl.models.tokens import TokenResponse

__all__ = [
    "Autoscaling",
    "CloudSpace",
    "CloudSpaceList",
    "CloudSpaceSpec",
    "CloudSpaceStatus",
    "DeleteResponse",
    "KubeconfigResponse",
    "ListMeta",
    "ObjectMeta",
    "OnDemandNodePool",
    "OnDemandNodePoolList",
    "Organization",
    "OrganizationList",
    "Region",
    "RegionList",
    "RegionSpec",
    "ServerClass",
    "ServerClassList",
    "SpotModel",
    "SpotNodePool",
    "SpotNodePoolList",
    "SpotNodePoolSpec",
    "TokenResponse",
]
