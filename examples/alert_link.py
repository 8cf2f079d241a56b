"""Build a Discover link for the last hour of 5xx errors, as an alert would."""

import logging
from datetime import timedelta

import kibanalink
from kibanalink import GenerationRequest, RelativeTimeScope, Sort, SystemClock

logging.basicConfig(level=logging.DEBUG)


def setup(config: kibanalink.MutableConfiguration) -> None:
    config.base_url = "https://kibana.example.net/app/kibana"
    config.data_sources = {
        "app": "application-logs-*",
        "aws": "cloudtrail-*",
    }


if __name__ == "__main__":
    kibanalink.configure(setup)
    one_hour_ago = SystemClock().now() - timedelta(hours=1)
    request = GenerationRequest(
        columns=["hostname", "status", "message"],
        query="status:>=500",
        sort=Sort("time", "desc"),
        refresh_interval=30,
        time_scope=RelativeTimeScope(from_time=one_hour_ago),
    )
    print(kibanalink.generate(request))
