import os
from setuptools import setup

version = '0.1.0'

ROOT_DIR = os.path.dirname(os.path.abspath(__file__))
try:
    with open(os.path.join(ROOT_DIR, 'README.md')) as f:
        README = f.read()
except IOError:
    README = ''

try:
    with open(os.path.join(ROOT_DIR, 'requirements.txt')) as f:
        INSTALL_REQUIRES = [line.strip() for line in f.readlines() if line.strip()]
except IOError:
    INSTALL_REQUIRES = []


def test_suite():
    import sys
    import unittest

    sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src'))

    test_loader = unittest.TestLoader()
    test_suite = test_loader.discover('tests', pattern='test_*.py')

    return test_suite


setup(
    name='unfold-iter',
    version=version,
    author='Aleksandr Susha',
    author_email='isushik94@gmail.com',
    description='Lazy sequences unfolded from a seed and a transition function',
    long_description=README,
    long_description_content_type='text/markdown',
    package_dir={'unfold': 'src/unfold'},
    packages=['unfold'],
    test_suite='setup.test_suite',
    install_requires=INSTALL_REQUIRES,
    python_requires='>=3.6',
    keywords=['iterator', 'generator', 'unfold', 'lazy', 'sequence'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
