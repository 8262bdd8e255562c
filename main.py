import logging

from rich.logging import RichHandler
from rich.pretty import pprint

from simplecli import *

__prog__ = "jailer"

logging.basicConfig(
    level=logging.WARNING,
    format="%(message)s",
    handlers=[RichHandler(rich_tracebacks=True)],
)


def build_arguments():
    return (
        Arguments()
        .insert(
            Argument("id")
            .with_required()
            .with_takes_value()
            .with_help("jail ID")
        )
        .insert(Argument("daemonize").with_help("Daemonize the jailer before execing"))
    )


if __name__ == '__main__':
    invocation = invoke(build_arguments(), shell=True, fancy=True)
    pprint(invocation)
