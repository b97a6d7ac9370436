from setuptools import setup, find_packages

setup(
    name="sous",
    version="0.3.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    description="Convert YAML recipes into Markdown, optionally rescaling servings.",
    install_requires=["PyYAML>=5.1", "Jinja2>=3.0"],
    extras_require={"tests": ["pytest"]},
    entry_points={
        "console_scripts": [
            "sous=sous.scripts.sous:main",
        ],
    },
)
