"""Module setuptools script."""
from setuptools import setup

# Read long description from README
try:
    with open('README.md', encoding='utf-8') as f:
        long_description = f.read()
except FileNotFoundError:
    long_description = ""

setup(
    name='wargamingApi',
    version='1.0.0',
    description='Unified client for the Wargaming.net public API (World of Tanks, Warplanes, Warships)',
    long_description=long_description,
    long_description_content_type="text/markdown",
    license='GPL-3.0',
    keywords=[
        'Wargaming',
        'World of Tanks',
        'World of Warplanes',
        'World of Warships',
        'REST API',
        'API Client',
    ],
    packages=[
        'wargamingApi',
        'wargamingApi.base',
        'wargamingApi.products',
    ],
    install_requires=[
        'requests',
        'python-dotenv',
    ],
    extras_require={
        'test': [
            'pytest',
            'responses',
        ],
    },
    python_requires='>=3.9',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Operating System :: OS Independent',
        "License :: OSI Approved :: GNU General Public License v3 (GPLv3)",
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Games/Entertainment',
        'Topic :: Internet :: WWW/HTTP',
    ]
)
