"""
Global pytest configuration for the FuzzyVis project.
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "properties: grid-based checks of membership function invariants"
    )
    config.addinivalue_line("markers", "cli: tests that invoke the command line app")
