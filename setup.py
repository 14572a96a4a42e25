# setup.py
from setuptools import setup, find_packages

setup(
    name="pon",
    version="0.1.0",
    description="A minimal tree-walking Lisp interpreter",
    packages=find_packages(include=["pon", "pon.*", "pon_lsp", "pon_lsp.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pygls>=1.1,<2",
        "lsprotocol",
    ],
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": [
            "pon = pon.repl:main",
            "pon-ls = pon_lsp.server:main",
        ],
    },
    zip_safe=False,
)
