"""Options dataclass for the checkout command."""

from dataclasses import dataclass

import click


@dataclass
class CheckoutOpts:
    """All options for `pr checkout`."""

    selector: str | None = None
    recurse_submodules: bool = False
    force: bool = False
    detach: bool = False
    branch_name: str | None = None
    shell_mode: bool = False
    skip_setup: bool = False

    def validate(self):
        """Raise click.UsageError for flag combinations that cannot be honoured."""
        if self.detach and self.branch_name:
            raise click.UsageError("--detach cannot be combined with: --branch")
