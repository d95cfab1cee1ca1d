import pytest

import flagslice


def pytest_addoption(parser):
    """Add command-line option to select the default error handling mode."""
    parser.addoption(
        "--error-handling",
        action="store",
        default="continue",
        choices=["continue", "exit", "panic"],
        help="Default error handling for flag sets that don't specify one.",
    )


@pytest.fixture(scope="function", autouse=True)
def options(request):
    """Fixture that restores package-wide options after each test."""

    original_options = dict(flagslice.options)
    flagslice.options["error_handling"] = request.config.getoption("--error-handling")
    yield flagslice.options
    flagslice.options.update(original_options)  # type: ignore
