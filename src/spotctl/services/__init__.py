from spotctl.services.cloudspaces import CloudspacesService, load_cloudspace_spec
from spotctl.services.nodepools import OnDemandNodePoolsService, SpotNodePoolsService, load_spot_nodepool_spec
from spotctl.services.organizations import OrganizationsService
from spotctl.services.regions import RegionsService
from spotctl.services.server_classes import ServerClassesService

__all__ = [
    "CloudspacesService",
    "OnDemandNodePoolsService",
    "OrganizationsService",
    "RegionsService",
    "ServerClassesService",
    "SpotNodePoolsService",
    "load_cloudspace_spec",
    "load_spot_nodepool_spec",
]
