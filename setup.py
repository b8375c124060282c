from setuptools import setup, find_packages
from os import path

setup_dir = path.abspath(path.dirname(__file__))
with open(path.join(setup_dir, 'README.md'),
          encoding='utf-8') as readme_file:
    long_description = readme_file.read()

setup(
    name="penrose_tools",
    version="0.1",
    packages=find_packages(include=["penrose_tools", "penrose_tools.*"]),
    include_package_data=True,

    install_requires=[
        "numpy>=1.22",
        "matplotlib>=3.5",
        "scipy"
    ],

    extras_require={
        "test": ["pytest"]
    },

    license="MIT",
    description="""Generate patches of the Penrose rhombus tiling by
    substitution of Robinson triangles""",

    long_description=long_description,
    long_description_content_type="text/markdown"
)
