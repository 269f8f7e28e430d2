from setuptools import setup, find_packages

setup(
    name="pyLegoHub",
    version="0.2.0",
    description="A Python package to talk to LEGO Powered UP and WeDo 2.0 hubs and their devices via BLE.",
    author="tnl2rgn2",
    author_email="tnl2rgn2@example.com",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "bleak",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.9",
)
