from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from garden_core.configuration import ConfigError
from garden_core.contracts import DEFAULT_PROVIDER_NAME, GardenError, PluginContext
from garden_core.orchestration import create_plugin_context
from garden_core.runtime import Garden
from garden_core.schemas import (
    ContextValidationError,
    plugin_context_json_schema,
    validate_plugin_context,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print the plugin context a provider would receive for a project."
    )
    parser.add_argument(
        "project",
        type=Path,
        nargs="?",
        default=Path("."),
        help="Path to garden.yml or the directory containing it",
    )
    parser.add_argument(
        "--provider",
        default=DEFAULT_PROVIDER_NAME,
        help=f"Provider to build the context for (default: {DEFAULT_PROVIDER_NAME})",
    )
    parser.add_argument("--env", dest="environment", default=None, help="Environment name")
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Check the context against the PluginContext schema before printing",
    )
    parser.add_argument(
        "--schema",
        action="store_true",
        help="Print the PluginContext JSON schema and exit",
    )
    parser.add_argument("--log-level", default="WARNING", help="Python logging level")
    return parser.parse_args()


class _NoAliasDumper(yaml.SafeDumper):
    def ignore_aliases(self, data: Any) -> bool:
        return True


def render_context(ctx: PluginContext) -> dict[str, Any]:
    store_path = getattr(ctx.local_config_store, "path", None)
    return {
        "project_name": ctx.project_name,
        "project_root": ctx.project_root,
        "environment_name": ctx.environment_name,
        "project_sources": [source.model_dump(mode="json") for source in ctx.project_sources],
        "local_config_store": str(store_path) if store_path is not None else None,
        "provider": ctx.provider.to_dict(),
        "providers": {name: provider.to_dict() for name, provider in ctx.providers.items()},
    }


def dump_context(ctx: PluginContext) -> str:
    """Render a context as plain YAML, repeating shared values instead of aliasing them."""
    return yaml.dump(render_context(ctx), Dumper=_NoAliasDumper, sort_keys=False)


def main() -> int:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper())

    if args.schema:
        print(json.dumps(plugin_context_json_schema(), indent=2))
        return 0

    try:
        garden = Garden.from_project(args.project, environment_name=args.environment)
        ctx = create_plugin_context(garden, args.provider)
        if args.validate:
            validate_plugin_context(ctx)
    except (GardenError, ConfigError, ContextValidationError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    print(dump_context(ctx), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())
