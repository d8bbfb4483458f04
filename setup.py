from setuptools import setup, find_namespace_packages

extras_require = {
    "test": [
        "beartype>=0.18.0",
        "pytest-cov>=4.1.0",
        "pytest-subtests>=0.11.0",
        "pytest>=8.2.0,<9",
    ],
    "dev": [
        "black==23.3.0",
        "flake8==6.1.0",
        "Flake8-pyproject==1.2.3",
        "isort==5.12.0",
        "mypy==1.5.1",
    ],
    "beartype": [
        "beartype>=0.18.0",
    ],
}
extras_require["dev"] += extras_require["test"]
extras_require["all"] = [item for name, group in extras_require.items() if name not in {"dev", "test"} for item in group]

setup(
    name="rsa-id-util",
    packages=find_namespace_packages(where="src"),
    version="0.1.0",
    package_dir={"": "src"},
    package_data={
        "rsaid.id": ["py.typed"],
        "rsaid.util": ["py.typed"],
        "rsaid.service": ["py.typed"],
    },
    description="South African ID number validation, decoding and generation",
    python_requires=">=3.11",
    install_requires=[
        "pydantic>=2.0.0,<3.0.0",
        "pydantic-settings>=2.7.0,<3.0.0",
        "sentry-sdk>=1.39.1",
    ],
    extras_require=extras_require,
    entry_points={
        "console_scripts": [
            "rsaid=rsaid.cli:main",
        ],
    },
    test_suite="tests",
)
