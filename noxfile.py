import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13"]


def _install(session: nox.Session) -> None:
    """Install the project with the test extra into the nox virtualenv."""
    session.run(
        "poetry",
        "install",
        "--extras",
        "test",
        external=True,
    )


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run full test suite across Python versions."""
    _install(session)
    session.run("pytest")


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run domain-layer tests only (no event loop or HTTP)."""
    _install(session)
    session.run(
        "pytest",
        "tests/notifications/domain/",
        "tests/ordering/domain/",
    )


@nox.session(python=PYTHON_VERSIONS[-1])
def load(session: nox.Session) -> None:
    """Run the locust load scenario headless against a running server."""
    session.run("poetry", "install", "--extras", "load", external=True)
    session.run(
        "locust",
        "-f",
        "loadtests/locustfile.py",
        "--headless",
        "--users",
        "20",
        "--spawn-rate",
        "5",
        "--run-time",
        "1m",
        *session.posargs,
    )
