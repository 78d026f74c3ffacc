from setuptools import setup, find_packages

setup(
    name="hourcast",
    version="0.1.0",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    install_requires=[
        'requests>=2.31.0',
        'PyYAML>=6.0',
        'python-dateutil>=2.8.2',
        'tabulate>=0.9.0',
        'typing_extensions>=4.5.0'
    ],
    extras_require={
        'test': [
            'pytest>=7.0.0',
            'requests-mock>=1.11.0'
        ]
    },
    entry_points={
        'console_scripts': [
            'hourcast=hourcast.cli:main'
        ]
    }
)
