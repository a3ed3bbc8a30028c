#!/usr/bin/env python3

from setuptools import setup
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="materialgraph",
        packages=[
            "materialgraph",
            "materialgraph.core",
            "materialgraph.material",
            "materialgraph.nodegraph",
        ],
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Node material graph editor core",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["material", "shader", "node-editor"],
        classifiers=[],
        install_requires=[
            "numpy",
            "PyQt6>=6.4",
        ],
        extras_require={
            "test": ["pytest"],
        },
        zip_safe=False,
    )
