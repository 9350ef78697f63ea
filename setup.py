# setup.py
from setuptools import find_namespace_packages, setup

setup(
    name="mdnavigator",
    version="1.0.0",
    description="Navigator and controller for a running Markdown viewer server",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["mdnavigator*"]),
    package_data={"mdnavigator.interface.locales": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[
        "requests",
        "customtkinter",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'mdnavigator=mdnavigator.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
