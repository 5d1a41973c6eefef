"""tokensig CLI application with Typer."""

import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Any, NoReturn

import typer

from tokensig import __version__
from tokensig.app import ErrorKind, RequestContext
from tokensig.app.adapters import FixedClock
from tokensig.bootstrap import ApplicationContainer, bootstrap_application, create_digest_adapter
from tokensig.config import Settings, get_settings
from tokensig.errors import ConfigurationError
from tokensig.headers import to_headers
from tokensig.utils.cli_output import json_response

app = typer.Typer(
    name="tokensig",
    help="Issue and verify iterated-digest request tokens",
    add_completion=True,
    no_args_is_help=True,
)


class Backend(str, Enum):
    """Digest providers selectable from the command line."""

    hashlib = "hashlib"
    cryptography = "cryptography"


KeyOption = Annotated[
    str | None,
    typer.Option("--key", "-k", help="Shared private key (overrides TOKENSIG_KEY)"),
]
KeyPathOption = Annotated[
    Path | None,
    typer.Option("--key-path", help="Read the shared key from this file"),
]
AlgorithmOption = Annotated[
    str | None,
    typer.Option("--algorithm", "-a", help="Digest algorithm, e.g. sha256"),
]
ValidityOption = Annotated[
    int | None,
    typer.Option("--validity-period", min=0, help="Maximum request age in seconds"),
]
BackendOption = Annotated[
    Backend | None,
    typer.Option("--backend", help="Digest provider: hashlib or cryptography"),
]
JsonOption = Annotated[
    bool,
    typer.Option("--json", help="Output result as JSON"),
]


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        typer.echo(f"tokensig version {__version__}")
        raise typer.Exit()


def _resolve_settings(
    *,
    key: str | None,
    key_path: Path | None,
    algorithm: str | None,
    validity_period: int | None,
    backend: Backend | None,
) -> Settings:
    """Apply CLI flags on top of the global settings."""

    updates: dict[str, Any] = {}
    if key is not None:
        updates["key"] = key
    if key_path is not None:
        updates["key_path"] = key_path
    if algorithm is not None:
        updates["algorithm"] = algorithm
    if validity_period is not None:
        updates["validity_period"] = validity_period
    if backend is not None:
        updates["digest_backend"] = backend.value

    settings = get_settings()
    if not updates:
        return settings
    merged = settings.model_dump()
    merged.update(updates)
    return Settings.model_validate(merged)


def _bootstrap(settings: Settings, *, now: int | None = None) -> ApplicationContainer:
    """Wire the application, turning configuration errors into exit code 2."""

    clock = FixedClock(now) if now is not None else None
    try:
        return bootstrap_application(settings, clock=clock)
    except ConfigurationError as exc:
        typer.secho(f"Configuration error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=2) from exc


def _fail(message: str, *, kind: ErrorKind, json_output: bool, **extra: Any) -> NoReturn:
    """Report a failed call; a missing key exits 2 like other configuration errors."""
    if json_output:
        typer.echo(
            json_response("failure", 1, ok=False, kind=kind.value, error=message, **extra)
        )
    else:
        typer.secho(f"❌ {message}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=2 if kind is ErrorKind.CONFIGURATION else 1)


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging"),
    ] = False,
) -> None:
    """tokensig - iterated-digest request signing."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command("create")
def create(
    uri: Annotated[str, typer.Argument(help="Request URI to sign")],
    timestamp: Annotated[
        int | None,
        typer.Option("--timestamp", "-t", help="Unix timestamp to sign (defaults to now)"),
    ] = None,
    now: Annotated[
        int | None,
        typer.Option("--now", help="Evaluate the validity window at this Unix time"),
    ] = None,
    key: KeyOption = None,
    key_path: KeyPathOption = None,
    algorithm: AlgorithmOption = None,
    validity_period: ValidityOption = None,
    backend: BackendOption = None,
    headers: Annotated[
        bool,
        typer.Option("--headers", help="Print HTTP headers instead of the bare token"),
    ] = False,
    json_output: JsonOption = False,
) -> None:
    """Issue a token for URI at a timestamp."""
    settings = _resolve_settings(
        key=key,
        key_path=key_path,
        algorithm=algorithm,
        validity_period=validity_period,
        backend=backend,
    )
    container = _bootstrap(settings, now=now)

    issued_at = timestamp if timestamp is not None else container.clock.now()
    outcome = container.engine.create(
        container.signing_config, RequestContext(uri=uri, timestamp=issued_at)
    )
    if outcome.failure is not None:
        _fail(outcome.error, kind=outcome.failure.kind, json_output=json_output)

    signed = outcome.raise_for_error()
    if json_output:
        payload = signed.as_dict()
        if headers:
            payload["headers"] = to_headers(signed)
        typer.echo(
            json_response("token", 1, ok=True, algorithm=container.signing_config.algorithm, **payload)
        )
    elif headers:
        for name, value in to_headers(signed).items():
            typer.echo(f"{name}: {value}")
    else:
        typer.echo(signed.token)


@app.command("check")
def check(
    uri: Annotated[str, typer.Argument(help="Request URI the token was issued for")],
    token: Annotated[str, typer.Argument(help="Token received with the request")],
    timestamp: Annotated[
        int,
        typer.Option("--timestamp", "-t", help="Unix timestamp the token was issued at"),
    ],
    now: Annotated[
        int | None,
        typer.Option("--now", help="Evaluate the validity window at this Unix time"),
    ] = None,
    key: KeyOption = None,
    key_path: KeyPathOption = None,
    algorithm: AlgorithmOption = None,
    validity_period: ValidityOption = None,
    backend: BackendOption = None,
    json_output: JsonOption = False,
) -> None:
    """Verify a token for URI and timestamp."""
    settings = _resolve_settings(
        key=key,
        key_path=key_path,
        algorithm=algorithm,
        validity_period=validity_period,
        backend=backend,
    )
    container = _bootstrap(settings, now=now)

    outcome = container.engine.check(
        container.signing_config, RequestContext(uri=uri, timestamp=timestamp, token=token)
    )
    if outcome.failure is not None:
        _fail(
            outcome.error,
            kind=outcome.failure.kind,
            json_output=json_output,
            uri=uri,
            when=timestamp,
        )

    if json_output:
        typer.echo(json_response("verification", 1, ok=True, uri=uri, when=timestamp))
    else:
        typer.secho("✅ Token is valid", fg=typer.colors.GREEN)


@app.command("algorithms")
def algorithms(
    backend: BackendOption = None,
    json_output: JsonOption = False,
) -> None:
    """List digest algorithms offered by a backend."""
    selected = backend.value if backend is not None else get_settings().digest_backend
    names = sorted(create_digest_adapter(selected).supported_algorithms())
    if json_output:
        typer.echo(json_response("algorithms", 1, backend=selected, algorithms=names))
        return
    for name in names:
        typer.echo(name)


if __name__ == "__main__":  # pragma: no cover
    app()
