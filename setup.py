from setuptools import setup, find_packages

setup(
    name='ipamctl',
    version='0.1.0',
    packages=find_packages(exclude=['ipamctl.tests']),
    include_package_data=True,
    install_requires=[
        'typer',
        'fastapi',
        'uvicorn',
        'kubernetes',
        'pydantic>=2',
        'pyyaml',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest>=7',
            'httpx',
        ]
    },
    entry_points={
        'console_scripts': [
            'ipamctl=ipamctl.cli:run'
        ]
    },
    description='Subnet address range validation, capacity accounting and admission webhook for cluster IPAM',
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
    ],
    python_requires='>=3.8',
)
