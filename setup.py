import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="eth-contract-deployer",
    version="0.1.0",
    description="Deploy compiled smart contracts to Ethereum networks",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "web3>=7.0.0,<8",
        "pyfiglet"
    ],
    extras_require={
        "test": [
            "pytest",
            "web3[tester]>=7.0.0,<8",
        ],
    },
    entry_points={
        "console_scripts": [
            "eth-deploy=eth_deployer.contract_deployer:main",
        ],
    },
    classifiers=[
                "Programming Language :: Python :: 3",
                "License :: OSI Approved :: MIT License",
                "Operating System :: OS Independent",
            ],
)
