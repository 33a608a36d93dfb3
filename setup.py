#!/usr/bin/env python3

import os
import sys
from setuptools import setup

if sys.version_info < (3, 7, 0):
    sys.stderr.write("This package requires Python 3.7 or newer.")
    sys.stderr.write(os.linesep)
    sys.exit(-1)

with open(os.path.join(os.path.dirname(__file__), 'requirements.txt')) as fd:
    requirements = [x.split('#')[0].strip()
                    for x in fd.readlines()]
    requirements = [x for x in requirements if x]

setup(
    name='ircstrings',
    version='0.1.0',
    description='Manipulation of IRC protocol strings: casemapping, masks, '
                'mode lines, formatting codes and numerics.',
    platforms=['any'],
    long_description="""A small library of pure functions for IRC clients,
    servers and bots: comparing nicknames under IRC casemappings, matching
    ban masks, parsing and diffing mode lines, stripping color codes,
    looking up numerics and decoding text of unknown encoding.""",
    classifiers = [
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Communications :: Chat :: Internet Relay Chat',
        'Topic :: Software Development :: Libraries',
        ],

    # Installation data
    packages=[
            'ircstrings',
            'ircstrings.self_tests',
            ],
    install_requires=requirements,
    extras_require={
        'test': ['pytest'],
        },
    entry_points={
        'console_scripts': ['ircstrings = ircstrings.__main__:main'],
        },
    )

# vim:set shiftwidth=4 softtabstop=4 expandtab textwidth=79:
