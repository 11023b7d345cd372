# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="treemark",
    version="1.0.0",
    description="Genera el árbol de carpetas de un proyecto y su documento Markdown",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["treemark", "treemark.*"]),
    package_data={"treemark.interface.locales": ["*.json"]},
    include_package_data=True,
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'treemark=treemark.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
