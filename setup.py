# Setup file for gradienthash python source
#
# Runtime requirements live in requirements.txt, optional extras in
# requirements-<extra>.txt

import glob
import os

from setuptools import setup


def read(fname):
    """
    Read the contents of a file.
    Parameters
    ----------
    fname : str
        Path to file.
    Returns
    -------
    str
        File contents.
    """
    with open(os.path.join(os.path.dirname(__file__), fname)) as f:
        return f.read()


install_requires = read("requirements.txt").splitlines()

# Dynamically determine extra dependencies
extras_require = {}
extra_req_files = glob.glob(os.path.join(os.path.dirname(__file__) or ".", "requirements-*.txt"))
for extra_req_file in extra_req_files:
    name = os.path.splitext(os.path.basename(extra_req_file))[0].replace("requirements-", "", 1)
    extras_require[name] = read(os.path.basename(extra_req_file)).splitlines()

# If there are any extras, add a catch-all case that includes everything.
if extras_require:
    extras_require["all"] = sorted({x for v in extras_require.values() for x in v})


setup(
    name="gradienthash",
    version="2.0.0",
    install_requires=install_requires,
    extras_require=extras_require,
    python_requires=">=3.9",
    description="Gradient based perceptual image hashing",
    author="gradienthash Authors",
    packages=["gradienthash"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Natural Language :: English",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Topic :: Multimedia :: Graphics",
        "Topic :: Software Development :: Libraries",
    ],
    keywords=["perceptual hash", "difference hash", "dhash", "image", "fingerprint"],
    license="Apache License 2.0",
    long_description=read("README.md"),
    long_description_content_type="text/markdown",
)
