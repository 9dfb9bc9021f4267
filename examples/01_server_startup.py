#!/usr/bin/env python3
"""
01_server_startup.py - Render options at server startup

Demonstrates:
- Reading the environment mode from RENDER_ENV
- Building RenderOptions with the fluent builder
- Publishing the snapshot file for file-watching tooling

Try: RENDER_ENV=dev python examples/01_server_startup.py
"""

from render_config import Environment, RenderOptions, create_app, settings_from_env


def main() -> None:
    app = create_app(settings_from_env())

    options = (
        RenderOptions.builder()
        .pkg_path("/pkg/app")
        .environment(Environment.from_env(app.settings.env_var))
        .socket_address("127.0.0.1:3000")
        .build()
    )

    app.publish(options)

    print(f"Serving {options.pkg_path} on {options.socket_address}")
    if options.live_reload_enabled:
        print(f"Live reload on port {options.reload_port}")
    print(f"Snapshot written to {app.snapshot_writer.path}")


if __name__ == "__main__":
    main()
