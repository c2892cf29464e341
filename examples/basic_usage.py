"""Basic usage example for webdeploy."""

import json

from webdeploy.config import DeploySettings, RemoteAgent, TraceLevel, load_settings, save_settings
from webdeploy.config import extensions


def main():
    """Basic usage example."""

    # Start from file/environment settings and chain the rest
    settings = (
        load_settings()
        .set_publish_url("https://web01.example.com:8172/msdeploy.axd")
        .use_agent_type(RemoteAgent.WMSVC)
        .use_username("deployer")
        .use_password("change-me")
        .set_allow_untrusted()
        .set_trace_level(TraceLevel.INFO)
        .from_source_path("./build/site.zip")
        .to_destination_path("Default Web Site/app")
        .set_what_if()
    )

    # Function form, useful when the settings come from elsewhere
    extensions.use_port(settings, RemoteAgent.WMSVC.default_port)

    print(json.dumps(settings.to_dict(mask_password=True), indent=2))
    save_settings(settings, "./example_outputs/deploy.json", mask_password=True)

    # A fresh dry-run copy of the same target
    dry_run = DeploySettings.from_dict(settings.to_dict()).set_delete(False)
    print(f"Dry run against {dry_run.publish_url}: what_if={dry_run.what_if}")


if __name__ == "__main__":
    main()
