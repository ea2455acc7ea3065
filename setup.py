# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="ceceio",
    version="0.1.0",
    description="A small Lisp-like expression language with an interpreter, shell and language server",
    packages=find_namespace_packages(include=["ceceio", "ceceio.*", "ceceio_lsp", "ceceio_lsp.*"]),
    package_data={"ceceio": ["prelude/*.cec"]},
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.0,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "ceceio=ceceio.cli:main",
            "ceceio-ls=ceceio_lsp.server:main",
        ],
    },
    zip_safe=False,
)
