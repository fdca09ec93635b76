# setup.py
from setuptools import setup, find_packages

setup(
    name="tale",
    version="0.1.0",
    description="TALE: a minimal Lisp interpreter with a REPL and language server",
    packages=find_packages(include=["tale", "tale.*", "tale_lsp", "tale_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "numpy",
        "pygls>=1.0,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis>=6.84"],
    },
    entry_points={
        "console_scripts": [
            "tale=tale.__main__:main",
            "tale-ls=tale_lsp.server:main",
        ],
    },
    zip_safe=False,
)
