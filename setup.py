import setuptools

with open("requirements.txt", "rt") as f:
  install_requires = [
    line.strip() for line in f
    if line.strip() and not line.startswith("#")
  ]

setuptools.setup(
  name="seqmap",
  version="0.1.0",
  description="Order preserving, list backed map for fast key-value (de)serialization.",
  python_requires=">=3.7,<4.0",
  packages=[ "seqmap" ],
  install_requires=install_requires,
  extras_require={
    "test": [ "pytest" ],
  },
  include_package_data=True,
)
