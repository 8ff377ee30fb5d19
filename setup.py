from setuptools import setup

with open("README.md", "r") as fh:
    long_description = fh.read()

setup(
    name             = "pymetardecoder",
    version          = "0.1.0",
    description      = "Python module to retrieve and decode METAR aviation weather reports",
    long_description = long_description,
    long_description_content_type = "text/markdown",
    packages         = [
        "pymetardecoder",
        "pymetardecoder.metar"
    ],
    python_requires  = ">=3.7",
    install_requires = [
        "httpx"
    ],
    extras_require   = {
        "test": ["pytest"]
    },
    entry_points     = {
        "console_scripts": [
            "metar = pymetardecoder.__main__:run"
        ]
    },
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Programming Language :: Python :: 3"
    ]
)
