from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Annotated, Any, NoReturn, TypeVar

import typer
from pydantic import ValidationError as PydanticValidationError

from spotctl.client import AsyncSpotClient
from spotctl.config import ClientConfig, load_config, locate_config, resolve_config, save_config
from spotctl.config.models import OUTPUT_FORMATS
from spotctl.errors import ConfigError, SpotctlError
from spotctl.models import Autoscaling, CloudSpace, CloudSpaceSpec, ObjectMeta, SpotNodePool, SpotNodePoolSpec
from spotctl.patch import PatchOperation, display_patch_operations, load_patch_operations
from spotctl.services import load_cloudspace_spec, load_spot_nodepool_spec
from spotctl.utils.output import (
    CLOUDSPACE_TABLE,
    ONDEMAND_NODEPOOL_TABLE,
    ORGANIZATION_TABLE,
    REGION_TABLE,
    SERVER_CLASS_TABLE,
    SPOT_NODEPOOL_TABLE,
    OutputFormat,
    TableConfig,
    emit,
)
from spotctl.version import BUILD_DATE, COMMIT, __version__

app = typer.Typer(no_args_is_help=True, add_completion=False, help="Command-line client for Rackspace Spot")
config_app = typer.Typer(no_args_is_help=True, help="Manage configuration settings")
regions_app = typer.Typer(no_args_is_help=True, help="Region APIs")
server_classes_app = typer.Typer(no_args_is_help=True, help="Server-class APIs")
organizations_app = typer.Typer(no_args_is_help=True, help="Organization APIs")
cloudspaces_app = typer.Typer(no_args_is_help=True, help="Cloudspace APIs")
spot_pools_app = typer.Typer(no_args_is_help=True, help="Spot nodepool APIs")
ondemand_pools_app = typer.Typer(no_args_is_help=True, help="On-demand nodepool APIs")

app.add_typer(config_app, name="config")
app.add_typer(regions_app, name="regions")
app.add_typer(server_classes_app, name="serverclasses")
app.add_typer(organizations_app, name="organizations")
app.add_typer(cloudspaces_app, name="cloudspaces")
app.add_typer(spot_pools_app, name="spotnodepool")
app.add_typer(ondemand_pools_app, name="ondemandnodepool")

logger = logging.getLogger(__name__)

T = TypeVar("T")

ClientFactory = Callable[[ClientConfig], AsyncSpotClient]

CONFIG_KEYS = {
    "refresh-token": "refresh_token",
    "region": "region",
    "namespace": "namespace",
    "base-url": "base_url",
    "debug": "debug",
    "timeout": "timeout",
    "output-format": "output_format",
}

OutputOption = Annotated[
    str | None,
    typer.Option("--output", "-o", help="Output format (table, json, yaml, wide)"),
]
NamespaceOption = Annotated[
    str | None,
    typer.Option("--namespace", "-n", help="Namespace (overrides config)"),
]
ConfirmOption = Annotated[bool, typer.Option("--confirm", help="Skip confirmation prompt")]


class CLIState:
    """Per-invocation settings collected from the global options."""

    def __init__(self, *, client_factory: ClientFactory | None = None) -> None:
        self.client_factory: ClientFactory = client_factory or AsyncSpotClient
        self.config_path: Path | None = None
        self.overrides: dict[str, Any] = {}
        self.output: str | None = None
        self._config: ClientConfig | None = None

    @property
    def config(self) -> ClientConfig:
        if self._config is None:
            self._config = resolve_config(self.config_path, self.overrides).data
            if self._config.debug:
                _configure_logging(True)
        return self._config

    def output_format(self, override: str | None = None) -> OutputFormat:
        selected = override or self.output or self.config.output_format
        if selected not in OUTPUT_FORMATS:
            raise typer.BadParameter(f"unsupported output format '{selected}' (expected one of {', '.join(OUTPUT_FORMATS)})")
        return selected  # type: ignore[return-value]

    def make_client(self) -> AsyncSpotClient:
        return self.client_factory(self.config.require_credentials())


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def _state(ctx: typer.Context) -> CLIState:
    obj = ctx.find_root().obj
    if not isinstance(obj, CLIState):
        raise typer.BadParameter("CLI context was not initialized")
    return obj


def _fail(exc: SpotctlError) -> NoReturn:
    typer.echo(f"error: {exc}", err=True)
    raise typer.Exit(code=1) from exc


def _call(state: CLIState, operation: Callable[[AsyncSpotClient], Awaitable[T]]) -> T:
    async def run() -> T:
        async with state.make_client() as client:
            return await operation(client)

    try:
        return asyncio.run(run())
    except SpotctlError as exc:
        _fail(exc)


def _resolved(state: CLIState) -> ClientConfig:
    try:
        return state.config
    except SpotctlError as exc:
        _fail(exc)


def _output(state: CLIState, override: str | None) -> OutputFormat:
    _resolved(state)
    return state.output_format(override)


def _emit(
    state: CLIState,
    value: Any,
    *,
    output: str | None,
    table: TableConfig,
    empty_message: str | None = None,
) -> None:
    fmt = _output(state, output)
    emit(value, output=fmt, table=table, empty_message=empty_message, no_pager=_resolved(state).no_pager)


def _namespace_label(state: CLIState, namespace: str | None) -> str:
    return namespace or _resolved(state).namespace or ""


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"spotctl {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    config_file: Annotated[Path | None, typer.Option("--config", help="Config file (default ~/.config/spotctl/config.yaml)")] = None,
    refresh_token: Annotated[str | None, typer.Option("--refresh-token", help="Rackspace Spot refresh token")] = None,
    region: Annotated[str | None, typer.Option("--region", help="Rackspace Spot region")] = None,
    namespace: Annotated[str | None, typer.Option("--namespace", help="Default namespace")] = None,
    base_url: Annotated[str | None, typer.Option("--base-url", help="Spot API base URL")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Enable debug output")] = False,
    no_pager: Annotated[bool, typer.Option("--no-pager", help="Disable the pager for long output")] = False,
    output: OutputOption = None,
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show version"),
    ] = None,
) -> None:
    _ = version
    state = ctx.obj if isinstance(ctx.obj, CLIState) else CLIState()
    state.config_path = config_file
    state.output = output
    state.overrides = {
        "refresh_token": refresh_token,
        "region": region,
        "namespace": namespace,
        "base_url": base_url,
        "debug": True if debug else None,
        "no_pager": True if no_pager else None,
    }
    ctx.obj = state
    _configure_logging(debug)


@app.command("version")
def version_command() -> None:
    """Print the version information."""

    typer.echo("spotctl")
    typer.echo("--------------------------------")
    typer.echo(f"version: {__version__}")
    typer.echo(f"commit hash: {COMMIT}")
    typer.echo(f"build date: {BUILD_DATE}")


def _mask(token: str | None) -> str:
    if not token:
        return "<not set>"
    return token[:8] + "***"


@config_app.command("show")
def config_show(ctx: typer.Context) -> None:
    """Show the current configuration."""

    state = _state(ctx)
    cfg = _resolved(state)
    path, _ = locate_config(state.config_path)

    typer.echo("Current configuration:")
    typer.echo(f"  refresh-token: {_mask(cfg.refresh_token_value)}")
    typer.echo(f"  region: {cfg.region or ''}")
    typer.echo(f"  namespace: {cfg.namespace or ''}")
    typer.echo(f"  base-url: {cfg.base_url}")
    typer.echo(f"  debug: {'true' if cfg.debug else 'false'}")
    typer.echo(f"  timeout: {cfg.timeout:g}")
    typer.echo(f"  output-format: {cfg.output_format}")
    typer.echo()
    if path.exists():
        typer.echo(f"Config file: {path}")
    else:
        typer.echo(f"No config file found. You can create one at {path}")


@config_app.command("set")
def config_set(
    ctx: typer.Context,
    key: Annotated[str, typer.Argument(help="Configuration key")],
    value: Annotated[str, typer.Argument(help="Configuration value")],
) -> None:
    """Set a configuration value and save it to the config file."""

    state = _state(ctx)
    field_name = CONFIG_KEYS.get(key)
    if field_name is None:
        _fail(ConfigError(f"invalid configuration key '{key}'. Valid keys are: {', '.join(CONFIG_KEYS)}"))

    try:
        loaded = load_config(state.config_path)
        merged = loaded.data.model_dump(exclude_unset=True)
        merged[field_name] = value
        try:
            updated = ClientConfig.model_validate(merged)
        except PydanticValidationError as exc:
            raise ConfigError(f"invalid value for {key}: {value}") from exc
        path = save_config(updated, path=loaded.path)
    except SpotctlError as exc:
        _fail(exc)

    shown = _mask(value) if field_name == "refresh_token" else value
    typer.echo(f"Configuration saved: {key} = {shown}")
    logger.debug("Wrote config file %s", path)


@config_app.command("init")
def config_init(ctx: typer.Context) -> None:
    """Initialize the configuration file with interactive prompts."""

    state = _state(ctx)
    typer.echo("Initializing spotctl configuration...")
    typer.echo()
    refresh_token = typer.prompt("Enter your Rackspace Spot refresh token", hide_input=True)
    region = typer.prompt("Enter your default region", default="uk-lon-1")
    namespace = typer.prompt("Enter your default namespace (organization id)", default="", show_default=False)

    try:
        path, _ = locate_config(state.config_path)
        cfg = ClientConfig(refresh_token=refresh_token, region=region, namespace=namespace or None)
        cfg.require_credentials()
        save_config(cfg, path=path)
    except SpotctlError as exc:
        _fail(exc)

    typer.echo()
    typer.echo("Configuration saved successfully!")
    typer.echo("You can now use spotctl.")


@regions_app.command("list")
def regions_list(ctx: typer.Context, output: OutputOption = None) -> None:
    """List all available regions."""

    state = _state(ctx)
    result = _call(state, lambda client: client.regions.list())
    _emit(state, result, output=output, table=REGION_TABLE, empty_message="No regions found")


@regions_app.command("get")
def regions_get(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Region name")],
    output: OutputOption = None,
) -> None:
    """Get details about a specific region."""

    state = _state(ctx)
    result = _call(state, lambda client: client.regions.get(name))
    _emit(state, result, output=output, table=REGION_TABLE)


@server_classes_app.command("list")
def server_classes_list(ctx: typer.Context, output: OutputOption = None) -> None:
    """List all available server classes."""

    state = _state(ctx)
    result = _call(state, lambda client: client.server_classes.list())
    _emit(state, result, output=output, table=SERVER_CLASS_TABLE, empty_message="No server classes found")


@server_classes_app.command("get")
def server_classes_get(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Server class name")],
    output: OutputOption = None,
) -> None:
    """Get details about a specific server class."""

    state = _state(ctx)
    result = _call(state, lambda client: client.server_classes.get(name))
    _emit(state, result, output=output, table=SERVER_CLASS_TABLE)


@organizations_app.command("list")
def organizations_list(ctx: typer.Context, output: OutputOption = None) -> None:
    """List organizations visible to the refresh token."""

    state = _state(ctx)
    result = _call(state, lambda client: client.organizations.list())
    fmt = _output(state, output)
    value: Any = result if fmt in {"json", "yaml"} else result.organizations
    _emit(state, value, output=output, table=ORGANIZATION_TABLE, empty_message="No organizations found")


@cloudspaces_app.command("list")
def cloudspaces_list(ctx: typer.Context, namespace: NamespaceOption = None, output: OutputOption = None) -> None:
    """List cloudspaces in a namespace."""

    state = _state(ctx)
    result = _call(state, lambda client: client.cloudspaces.list(namespace))
    _emit(
        state,
        result.items,
        output=output,
        table=CLOUDSPACE_TABLE,
        empty_message=f"No cloudspaces found in namespace {_namespace_label(state, namespace)}",
    )


@cloudspaces_app.command("get")
def cloudspaces_get(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Cloudspace name")],
    namespace: NamespaceOption = None,
    output: OutputOption = None,
) -> None:
    """Get a cloudspace."""

    state = _state(ctx)
    result = _call(state, lambda client: client.cloudspaces.get(name, namespace=namespace))
    _emit(state, result, output=output, table=CLOUDSPACE_TABLE)


@cloudspaces_app.command("create")
def cloudspaces_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Cloudspace name")],
    namespace: NamespaceOption = None,
    file: Annotated[Path | None, typer.Option("--file", "-f", help="JSON file containing the cloudspace spec")] = None,
    region: Annotated[str | None, typer.Option("--region", "-r", help="Region (required unless using --file)")] = None,
    kubernetes_version: Annotated[
        str | None,
        typer.Option("--kubernetes-version", help="Kubernetes version (required unless using --file)"),
    ] = None,
    webhook: Annotated[str | None, typer.Option(help="Webhook URL for notifications")] = None,
    ha_control_plane: Annotated[bool, typer.Option("--ha-control-plane", help="Enable HA control plane")] = False,
    cni: Annotated[str, typer.Option(help="Container Network Interface (CNI) to use")] = "cilium",
    cloud: Annotated[str, typer.Option(help="Cloud provider")] = "default",
    output: OutputOption = None,
) -> None:
    """Create a cloudspace from flags or a JSON spec file."""

    state = _state(ctx)
    try:
        if file is not None:
            spec = load_cloudspace_spec(file)
            spec.cloud = cloud
        else:
            if not region:
                raise typer.BadParameter("region is required (use --region flag or --file)")
            if not kubernetes_version:
                raise typer.BadParameter("kubernetes version is required (use --kubernetes-version flag or --file)")
            spec = CloudSpaceSpec(
                region=region,
                kubernetesVersion=kubernetes_version,
                webhook=webhook,
                HAControlPlane=ha_control_plane,
                cloud=cloud,
                cni=cni,
            )
    except SpotctlError as exc:
        _fail(exc)

    cloudspace = CloudSpace(metadata=ObjectMeta(name=name, namespace=namespace), spec=spec)
    result = _call(state, lambda client: client.cloudspaces.create(cloudspace, namespace=namespace))
    _emit(state, result, output=output, table=CLOUDSPACE_TABLE)


@cloudspaces_app.command("edit")
def cloudspaces_edit(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Cloudspace name")],
    file: Annotated[Path, typer.Option("--file", "-f", help="JSON file containing patch operations")],
    namespace: NamespaceOption = None,
    confirm: ConfirmOption = False,
    output: OutputOption = None,
) -> None:
    """Apply JSON Patch operations to a cloudspace."""

    state = _state(ctx)
    patch_ops = _prepare_patch(file, name=name, confirm=confirm)
    if patch_ops is None:
        return
    result = _call(state, lambda client: client.cloudspaces.edit(name, patch_ops, namespace=namespace))
    _emit(state, result, output=output, table=CLOUDSPACE_TABLE)


@cloudspaces_app.command("delete")
def cloudspaces_delete(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Cloudspace name")],
    namespace: NamespaceOption = None,
    confirm: ConfirmOption = False,
) -> None:
    """Delete a cloudspace."""

    state = _state(ctx)
    ns = _namespace_label(state, namespace)
    if not confirm and not typer.confirm(f"Are you sure you want to delete cloudspace '{name}' in namespace '{ns}'?"):
        typer.echo("Delete cancelled")
        return

    response = _call(state, lambda client: client.cloudspaces.delete(name, namespace=namespace))
    _report_delete(response, success=f"Cloudspace '{name}' deleted successfully from namespace '{ns}'")


@cloudspaces_app.command("get-config")
def cloudspaces_get_config(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Cloudspace name")],
    org: Annotated[str | None, typer.Option("--org", help="Organization name (defaults to the namespace's organization)")] = None,
    output_file: Annotated[Path | None, typer.Option("--file", "-f", help="Write kubeconfig to file")] = None,
) -> None:
    """Generate a kubeconfig for a cloudspace."""

    state = _state(ctx)

    async def generate(client: AsyncSpotClient) -> str:
        organization = org
        if not organization:
            namespace = client.namespace
            found = await client.organizations.find(namespace) if namespace else None
            if found is None:
                raise ConfigError("organization is required (use --org or configure a namespace)")
            organization = found.name
        return await client.cloudspaces.generate_kubeconfig(name, organization=organization)

    kubeconfig = _call(state, generate)
    if output_file is None:
        typer.echo(kubeconfig)
        return
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(kubeconfig, encoding="utf-8")
        output_file.chmod(0o600)
    except OSError as exc:
        _fail(ConfigError(f"failed to write kubeconfig to {output_file}: {exc}"))
    typer.echo(f"wrote kubeconfig to {output_file}")


@spot_pools_app.command("list")
def spot_pools_list(ctx: typer.Context, namespace: NamespaceOption = None, output: OutputOption = None) -> None:
    """List spot node pools in a namespace."""

    state = _state(ctx)
    result = _call(state, lambda client: client.spot_nodepools.list(namespace))
    _emit(
        state,
        result.items,
        output=output,
        table=SPOT_NODEPOOL_TABLE,
        empty_message=f"No spot node pools found in namespace {_namespace_label(state, namespace)}",
    )


@spot_pools_app.command("get")
def spot_pools_get(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Spot node pool name")],
    namespace: NamespaceOption = None,
    output: OutputOption = None,
) -> None:
    """Get a spot node pool."""

    state = _state(ctx)
    result = _call(state, lambda client: client.spot_nodepools.get(name, namespace=namespace))
    _emit(state, result, output=output, table=SPOT_NODEPOOL_TABLE)


@spot_pools_app.command("create")
def spot_pools_create(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Spot node pool name")],
    namespace: NamespaceOption = None,
    file: Annotated[Path | None, typer.Option("--file", "-f", help="JSON file containing the spot node pool spec")] = None,
    server_class: Annotated[str | None, typer.Option("--server-class", help="Server class")] = None,
    cloudspace: Annotated[str | None, typer.Option("--cloudspace", help="Cloudspace the pool joins")] = None,
    desired: Annotated[int, typer.Option("--desired", min=0, help="Desired number of nodes")] = 0,
    autoscaling: Annotated[bool, typer.Option("--autoscaling", help="Enable autoscaling")] = False,
    min_nodes: Annotated[int, typer.Option("--autoscaling-min-nodes", min=0, help="Autoscaling minimum")] = 0,
    max_nodes: Annotated[int, typer.Option("--autoscaling-max-nodes", min=0, help="Autoscaling maximum")] = 0,
    bid_price: Annotated[str | None, typer.Option("--bid-price", help="Bid price per hour")] = None,
    output: OutputOption = None,
) -> None:
    """Create a spot node pool from flags or a JSON spec file."""

    state = _state(ctx)
    try:
        if file is not None:
            spec = load_spot_nodepool_spec(file)
        else:
            if not server_class:
                raise typer.BadParameter("server-class is required (use --server-class flag or --file)")
            if not cloudspace:
                raise typer.BadParameter("cloudspace is required (use --cloudspace flag or --file)")
            if desired <= 0:
                raise typer.BadParameter("desired is required and must be greater than 0 (use --desired flag or --file)")
            spec = SpotNodePoolSpec(
                serverClass=server_class,
                cloudSpace=cloudspace,
                desired=desired,
                bidPrice=bid_price or None,
            )
            if autoscaling:
                spec.autoscaling = Autoscaling(enabled=True, minNodes=min_nodes, maxNodes=max_nodes)
    except SpotctlError as exc:
        _fail(exc)

    pool = SpotNodePool(metadata=ObjectMeta(name=name, namespace=namespace), spec=spec)
    result = _call(state, lambda client: client.spot_nodepools.create(pool, namespace=namespace))
    _emit(state, result, output=output, table=SPOT_NODEPOOL_TABLE)


@spot_pools_app.command("edit")
def spot_pools_edit(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Spot node pool name")],
    file: Annotated[Path, typer.Option("--file", "-f", help="JSON file containing patch operations")],
    namespace: NamespaceOption = None,
    confirm: ConfirmOption = False,
    output: OutputOption = None,
) -> None:
    """Apply JSON Patch operations to a spot node pool."""

    state = _state(ctx)
    patch_ops = _prepare_patch(file, name=name, confirm=confirm)
    if patch_ops is None:
        return
    result = _call(state, lambda client: client.spot_nodepools.edit(name, patch_ops, namespace=namespace))
    _emit(state, result, output=output, table=SPOT_NODEPOOL_TABLE)


@spot_pools_app.command("delete")
def spot_pools_delete(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Spot node pool name")],
    namespace: NamespaceOption = None,
    confirm: ConfirmOption = False,
) -> None:
    """Delete a spot node pool."""

    state = _state(ctx)
    ns = _namespace_label(state, namespace)
    if not confirm and not typer.confirm(f"Are you sure you want to delete spot node pool '{name}' in namespace '{ns}'?"):
        typer.echo("Delete cancelled")
        return

    response = _call(state, lambda client: client.spot_nodepools.delete(name, namespace=namespace))
    _report_delete(response, success=f"Spot node pool '{name}' deleted successfully from namespace '{ns}'")


@spot_pools_app.command("delete-all")
def spot_pools_delete_all(
    ctx: typer.Context,
    namespace: NamespaceOption = None,
    confirm: ConfirmOption = False,
) -> None:
    """Delete every spot node pool in a namespace."""

    state = _state(ctx)
    ns = _namespace_label(state, namespace)
    typer.echo(f"Listing spot node pools in namespace '{ns}':")
    typer.echo()
    pools = _call(state, lambda client: client.spot_nodepools.list(namespace))
    if not pools.items:
        typer.echo("No spot node pools found in the namespace.")
        return

    _emit(state, pools.items, output="table", table=SPOT_NODEPOOL_TABLE)
    count = len(pools.items)
    typer.echo()
    typer.echo(f"Found {count} spot node pool(s) to delete.")
    if not confirm and not typer.confirm(
        f"Are you sure you want to delete ALL {count} spot node pool(s) in namespace '{ns}'?"
    ):
        typer.echo("Delete cancelled")
        return

    response = _call(state, lambda client: client.spot_nodepools.delete_all(namespace))
    _report_delete(response, success=f"Successfully deleted all {count} spot node pool(s) from namespace '{ns}'")


@ondemand_pools_app.command("list")
def ondemand_pools_list(ctx: typer.Context, namespace: NamespaceOption = None, output: OutputOption = None) -> None:
    """List on-demand node pools in a namespace."""

    state = _state(ctx)
    result = _call(state, lambda client: client.ondemand_nodepools.list(namespace))
    _emit(
        state,
        result.items,
        output=output,
        table=ONDEMAND_NODEPOOL_TABLE,
        empty_message=f"No on-demand node pools found in namespace {_namespace_label(state, namespace)}",
    )


@ondemand_pools_app.command("get")
def ondemand_pools_get(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="On-demand node pool name")],
    namespace: NamespaceOption = None,
    output: OutputOption = None,
) -> None:
    """Get an on-demand node pool."""

    state = _state(ctx)
    result = _call(state, lambda client: client.ondemand_nodepools.get(name, namespace=namespace))
    _emit(state, result, output=output, table=ONDEMAND_NODEPOOL_TABLE)


def _prepare_patch(file: Path, *, name: str, confirm: bool) -> list[PatchOperation] | None:
    """Load and display patch operations; None when the user declines."""

    try:
        patch_ops = load_patch_operations(file)
    except SpotctlError as exc:
        _fail(exc)

    display_patch_operations(patch_ops)
    if confirm or typer.confirm(f"Do you want to apply these patches to '{name}'?"):
        return patch_ops
    typer.echo("Patch operation cancelled.")
    return None


def _report_delete(response: Any, *, success: str) -> None:
    if response.status in ("Success", ""):
        typer.echo(success)
        return
    typer.echo(f"Delete operation completed with status: {response.status}")
    if response.message:
        typer.echo(f"Message: {response.message}")


def run() -> None:
    try:
        app()
    except SpotctlError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise SystemExit(1) from exc


if __name__ == "__main__":
    run()
