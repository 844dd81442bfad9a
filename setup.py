# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="logx",
    version="0.1.0",
    description="Leveled text/JSON logging with a time-rotating, self-pruning file sink",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["logx", "logx.*"]),
    python_requires=">=3.8",
    install_requires=[
        "requests",  # HttpWriter
        "urllib3",
    ],
    extras_require={
        "test": ["pytest"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
