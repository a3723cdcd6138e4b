# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="sourcemap-rebase",
    version="0.1.0",
    description="Rewrite local source paths in sourcemaps to package-relative paths",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["sourcemap_rebase*"]),
    python_requires=">=3.9",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'sourcemap-rebase=sourcemap_rebase.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
