from setuptools import setup, find_packages
import re

# Read version from careerpay/__init__.py
with open('careerpay/__init__.py') as f:
    version = re.search(r'^__version__ = ["\']([^"\']+)["\']', f.read(), re.MULTILINE).group(1)

setup(
    name='careerpay',
    version=version,
    packages=find_packages(include=['careerpay', 'careerpay.*']),
    package_data={
        'careerpay': ['tax_rules/*.yaml'],
    },
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
            'career-pay=careerpay.cli.__main__:main',
            'career-pay-mcp=careerpay.mcp.server:run_server',
        ],
    },
    author='Career Hub',
    description='Pay, take-home and salary conversion calculators.',
    python_requires='>=3.10',
)
