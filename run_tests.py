"""Test runner script for the catch query engine.

Usage:
    python run_tests.py              # run the suite
    python run_tests.py --coverage   # also report coverage of the engine packages
"""
import sys
import subprocess

PACKAGES = ("measure", "entry", "query", "export", "config", "core", "app")


def build_command(coverage=False):
    cmd = [sys.executable, "-m", "pytest", "tests/", "-v", "--tb=short"]
    if coverage:
        cmd += [f"--cov={package}" for package in PACKAGES]
        cmd += ["--cov-report=term-missing", "--cov-report=html"]
    else:
        cmd.append("--color=yes")
    return cmd


def run_tests(coverage=False):
    """Run pytest and return its exit code."""
    title = "Catch Query Engine Tests" + (" (coverage)" if coverage else "")
    print("=" * 70)
    print(title)
    print("=" * 70)

    try:
        returncode = subprocess.run(build_command(coverage), check=False).returncode
    except FileNotFoundError:
        missing = "pytest-cov" if coverage else "pytest"
        print(f"ERROR: {missing} not found. Install it with: pip install -e .[test]")
        return 1

    if coverage and returncode == 0:
        print("Coverage report generated in htmlcov/index.html")
    return returncode


if __name__ == "__main__":
    sys.exit(run_tests(coverage="--coverage" in sys.argv or "-c" in sys.argv))
