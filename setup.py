from setuptools import find_packages, setup

setup(
  name="goldilocks",
  version="0.1.0",
  author="Goldilocks developers",
  description="Ed448-Goldilocks public key encryption and signatures from a passphrase",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(include=["goldilocks", "goldilocks.*"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
  ],
  install_requires=[
    "colorama>=0.4",
    "pycryptodome>=3.11",
    "pynacl>=1.4",
    "pyperclip>=1.8",
    "zxcvbn-covert>=5.0",
  ],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
  include_package_data=True,
  entry_points=dict(console_scripts=["goldilocks = goldilocks.cli.__main__:main"]),
)
