from pathlib import Path
from setuptools import setup, find_packages

BASE_DIR = Path(__file__).parent

# ----------------------------------------------------------------------
# Core version & requirements (the library itself)
# ----------------------------------------------------------------------
version = (BASE_DIR / ".version").read_text().strip()
long_description = (BASE_DIR / "README.md").read_text(encoding="utf-8")
requirements_lib = (BASE_DIR / "requirements_lib.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Test requirements
# ----------------------------------------------------------------------
requirements_test = (BASE_DIR / "requirements_test.txt").read_text().splitlines()

# ----------------------------------------------------------------------
# Extras handling
# ----------------------------------------------------------------------
extras = {
    "test": requirements_test,
}

# ----------------------------------------------------------------------
setup(
    name="log-anon",
    version=version,
    description="Log anonymizer – deterministic, salted tokens for sensitive data",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(
        where=".",
        include=[
            "log_anon_lib*",
            "log_anon_cli*",
        ],
        exclude=("tests", "docs"),
    ),
    python_requires=">=3.10",
    install_requires=requirements_lib,
    extras_require=extras,
    entry_points={
        "console_scripts": {
            "log-anon=log_anon_cli.fast_anonymizer:main",
        }
    },
)
