from setuptools import setup


setup(
    version="1.0.0",
    name="kv-store",
    description=(
        "thread-safe in-memory key-value store with an interactive "
        + "command line and snapshot persistence"
    ),
    license="MIT",
    python_requires=">=3.10",
    install_requires=[],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    packages=[
        "kv_store",
        "kv_store.cli",
        "kv_store.store",
        "kv_store.store.backend",
        "kv_store.store.snapshot",
    ],
    package_data={
        "kv_store": ["py.typed"],
    },
    entry_points={
        "console_scripts": [
            "kv-store = kv_store.cli.app:main",
        ],
    },
)
