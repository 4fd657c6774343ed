from setuptools import setup, find_packages

setup(
    name="polewire",
    version="0.1.0",
    description="Named poles on electrical devices and the wires between them",
    author="Your Name",
    packages=find_packages(include=["polewire", "polewire.*"]),
    install_requires=[
        "networkx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.7",
)
