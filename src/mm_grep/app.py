"""GrepTyper: Typer for a single-command CLI with built-in ``--version``.

Pass ``package_name`` at init and every registered command gets a
``--version`` / ``-V`` eager flag that prints ``{package_name}: {version}``
and exits. Help is long-only (``--help``) so ``-h`` stays free for the
command's own flags.
"""

import importlib.metadata
import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

import typer
from typer import Typer

from .output import print_plain


def create_version_callback(package_name: str) -> Callable[[bool], None]:
    """Create a --version flag callback for a Typer CLI app.

    Args:
        package_name: The installed package name to look up the version for.

    """

    def version_callback(value: bool) -> None:
        """Print the version and exit when --version is passed."""
        if value:
            print_plain(f"{package_name}: {importlib.metadata.version(package_name)}")
            raise typer.Exit

    return version_callback


class GrepTyper(Typer):
    """Typer subclass that injects ``--version`` into commands.

    Args:
        package_name: If set, commands get a ``--version`` / ``-V`` flag.
            A command that already defines a ``_version`` parameter is left alone.
        **kwargs: Forwarded to ``Typer.__init__``.

    """

    def __init__(self, *, package_name: str | None = None, **kwargs: Any) -> None:  # noqa: ANN401 — must forward arbitrary kwargs to Typer
        """Apply CLI defaults and remember the package name."""
        self._package_name = package_name
        kwargs.setdefault("no_args_is_help", True)
        kwargs.setdefault("pretty_exceptions_enable", False)
        kwargs.setdefault("add_completion", False)
        super().__init__(**kwargs)

    def command(self, name: str | None = None, **kwargs: Any) -> Callable[..., Any]:  # noqa: ANN401 — must forward arbitrary kwargs to Typer.command
        """Register a command, adding ``--version`` when ``package_name`` is set."""
        # Single-command apps take no_args_is_help from the command, not the app
        if isinstance(self.info.no_args_is_help, bool):
            kwargs.setdefault("no_args_is_help", self.info.no_args_is_help)
        decorator = super().command(name, **kwargs)

        package_name = self._package_name
        if not package_name:
            return decorator

        def injecting_decorator(f: Callable[..., Any]) -> Callable[..., Any]:
            sig = inspect.signature(f)
            if "_version" in sig.parameters:
                return decorator(f)

            version_param = inspect.Parameter(
                "_version",
                inspect.Parameter.KEYWORD_ONLY,
                default=typer.Option(
                    None, "--version", "-V", callback=create_version_callback(package_name), is_eager=True, help="Show version and exit."
                ),
                annotation=bool | None,
            )

            @wraps(f)
            def wrapper(*f_args: Any, _version: bool | None = None, **f_kwargs: Any) -> Any:  # noqa: ANN401 — must match arbitrary command signatures
                return f(*f_args, **f_kwargs)

            wrapper.__signature__ = sig.replace(parameters=[*sig.parameters.values(), version_param])  # type: ignore[attr-defined]
            wrapper.__annotations__ = {**f.__annotations__, "_version": bool | None}
            decorator(wrapper)
            return f

        return injecting_decorator
