"""Console entry point: ``wgexporter`` / ``python -m wgexporter``.

Examples:
  wgexporter -c /etc/wireguard/wg0.conf -i wg0

  wgexporter -p 127.0.0.1:9586 -a /wg-metrics -v
"""

from __future__ import annotations

import os
import sys

from tabulate import tabulate

from wgexporter import __version__, configure_logging
from wgexporter import glogger
from wgexporter.models import ExporterSettings


def _print_startup_banner(settings: ExporterSettings) -> None:
    startup_rows = [
        ["version", __version__],
        ["listen", settings.listen_address + settings.metrics_path],
        ["config", settings.config_path],
        ["interface", settings.interface],
        ["wg binary", settings.wg_binary],
    ]

    for var in ("GITHUB_REF", "GITHUB_SHA", "BUILDTIME"):
        val = os.environ.get(var)
        if val and not val.endswith("_is_undefined"):
            startup_rows.append([var, val])

    table_str = tabulate(startup_rows, tablefmt="mixed_grid")
    lines = table_str.split("\n")
    table_width = len(lines[0])
    title = "wgexporter starting up"
    title_border = "┍" + "━" * (table_width - 2) + "┑"
    title_row = "│ " + title.center(table_width - 4) + " │"
    separator = lines[0].replace("┍", "┝").replace("┑", "┥").replace("┯", "┿")

    glogger.opt(raw=True).info(
        "\n{}\n", title_border + "\n" + title_row + "\n" + separator + "\n" + "\n".join(lines[1:])
    )


def main() -> None:
    """Main entry point: configure logging, print the banner, run the exporter."""
    configure_logging()

    from wgexporter.cli import main as cli_main

    cli_main(sys.argv[1:], startup_hook=_print_startup_banner)


if __name__ == "__main__":
    main()
