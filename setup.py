"""
setuptools build script for the envspaces package.

Reads the package version from ``envspaces/__init__.py`` without importing the
package, so the build does not need the runtime dependencies installed, and
takes runtime and development dependencies from the requirements files.
"""

import pathlib
import re

import setuptools

HERE = pathlib.Path(__file__).parent
PACKAGE_DIR = HERE / 'envspaces'
README_PATH = HERE / 'README.md'
REQUIREMENTS_PATH = HERE / 'requirements.txt'
DEV_REQUIREMENTS_PATH = HERE / 'requirements-dev.txt'

PACKAGE_NAME = 'envspaces'
AUTHOR = 'envspaces Development Team'
DESCRIPTION = 'Gymnasium-style observation/action spaces with validated Box construction and seeded RNGs'
LICENSE = 'MIT'

KEYWORDS = [
    'reinforcement learning', 'gymnasium', 'spaces', 'box space', 'seeding',
]

CLASSIFIERS = [
    'Development Status :: 3 - Alpha',
    'Intended Audience :: Science/Research',
    'Topic :: Scientific/Engineering :: Artificial Intelligence',
    'License :: OSI Approved :: MIT License',
    'Programming Language :: Python :: 3',
    'Programming Language :: Python :: 3.10',
    'Programming Language :: Python :: 3.11',
    'Programming Language :: Python :: 3.12',
    'Programming Language :: Python :: 3.13',
]

CORE_REQUIREMENTS = [
    'gymnasium>=0.29.0',
    'numpy>=1.26.0',
    'pydantic>=2.0.0',
    'PyYAML>=6.0',
    'loguru>=0.7.0',
]

TEST_REQUIREMENTS = [
    'pytest>=8.0.0',
    'hypothesis>=6.0.0',
]


def read_requirements(requirements_file: pathlib.Path) -> list:
    """
    Read package specifications from a requirements file, skipping blank lines
    and comments. Returns an empty list when the file does not exist.
    """
    if not requirements_file.exists():
        return []

    requirements = []
    for line in requirements_file.read_text(encoding='utf-8').splitlines():
        line = line.split('#')[0].strip()
        if line and not line.startswith('-'):
            requirements.append(line)
    return requirements


def read_long_description() -> str:
    if README_PATH.exists():
        return README_PATH.read_text(encoding='utf-8')
    return DESCRIPTION


def get_version_from_package() -> str:
    """Extract ``__version__`` from the package ``__init__.py`` without importing it."""
    init_text = (PACKAGE_DIR / '__init__.py').read_text(encoding='utf-8')
    match = re.search(r'^__version__\s*=\s*[\'"]([^\'"]+)[\'"]', init_text, re.MULTILINE)
    if not match:
        raise RuntimeError('Unable to find __version__ in envspaces/__init__.py')
    return match.group(1)


def setup_package():
    install_requires = read_requirements(REQUIREMENTS_PATH) or CORE_REQUIREMENTS
    dev_requirements = read_requirements(DEV_REQUIREMENTS_PATH) or TEST_REQUIREMENTS

    setuptools.setup(
        name=PACKAGE_NAME,
        version=get_version_from_package(),
        description=DESCRIPTION,
        long_description=read_long_description(),
        long_description_content_type='text/markdown',
        author=AUTHOR,
        license=LICENSE,
        keywords=KEYWORDS,
        classifiers=CLASSIFIERS,
        packages=setuptools.find_packages(exclude=['tests', 'tests.*']),
        install_requires=install_requires,
        extras_require={
            'dev': dev_requirements,
            'test': TEST_REQUIREMENTS,
        },
        package_data={'envspaces': ['config/*.yaml']},
        python_requires='>=3.10',
        zip_safe=False,
        include_package_data=True,
    )


if __name__ == '__main__':
    setup_package()
