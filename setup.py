from setuptools import find_packages, setup

setup(
  name="ed2curve",
  version="0.1.0",
  author="ed2curve contributors",
  description="Convert Ed25519 keys and signatures to Curve25519 (X25519) in plain Python",
  long_description=open("README.md").read(),
  long_description_content_type="text/markdown",
  packages=find_packages(exclude=["tests"]),
  python_requires=">=3.9",
  classifiers=[
    "Programming Language :: Python :: 3",
    "License :: OSI Approved :: MIT License",
    "Operating System :: OS Independent",
    "Topic :: Security :: Cryptography",
  ],
  install_requires=[],
  extras_require={
    "test": ["pytest", "pytest-sugar", "pytest-mock", "coverage", "mypy", "bandit", "pynacl>=1.4", "cryptography>=35"],
    "dev": ["tox", "isort", "yapf"],
  },
)
