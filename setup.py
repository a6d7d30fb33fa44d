from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

with open("requirements.txt", "r", encoding="utf-8") as req_file:
    requirements = req_file.read().splitlines()

setup(
    name="langreg",
    description="Keyed factory registry with a configurable default key, driven by Hydra/OmegaConf configs.",
    version="1.0.0",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(),
    package_data={"langreg": ["configs/*.yaml"]},
    license="MIT License",
    install_requires=requirements,
    extras_require={"test": ["pytest"]},
)
