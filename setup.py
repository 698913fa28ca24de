from setuptools import setup, find_packages
import re

# Read version from calpay/__init__.py
with open('calpay/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='calpay',
    version=version,
    packages=find_packages(include=['calpay', 'calpay.*']),
    install_requires=[
        'PyYAML>=6.0',
        'click>=8.0',
        'pydantic>=2.0.0',
        'rich>=13.0',
    ],
    extras_require={
        'mcp': [
            'mcp[cli]>=1.0.0,<2',
        ],
        'test': [
            'pytest>=7.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'calpay=calpay.cli.__main__:main',
            'calpay-mcp=calpay.mcp.server:run_server',
        ],
    },
    author='Personal',
    description='California State Government monthly pay periods (SAM 8500), 1994-2299.',
    python_requires='>=3.10',
)
