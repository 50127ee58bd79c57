from os import path
from re import match, S
from setuptools import setup

with open(path.join('mediawiki_api', '__init__.py'), 'r') as f:
    contents = f.read()
    longdesc = match('^"""(.*?)"""', contents, S).group(1)
    version = match(r'[\s\S]*__version__[^\'"]+[\'"]([^\'"]+)[\'"]', contents).group(1)
    del contents

setup(
    name="mediawiki-api",
    version=version,
    description="A MediaWiki client for logins and token-gated edits.",
    long_description=longdesc,
    long_description_content_type='text/x-rst',
    license="MIT",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Wiki',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
    ],
    keywords='mediawiki api requests',
    packages=["mediawiki_api"],
    install_requires=['requests'],
    python_requires='>=3.6',
    extras_require={
        'test': ['pytest'],
    },
)
