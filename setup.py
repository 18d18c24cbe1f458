#!/usr/bin/env python
# Encoding: utf-8
# See: <https://setuptools.pypa.io/en/latest/userguide/>
import os
from setuptools import setup

NAME        = "functionsmixins"
WEBSITE     = "http://www.github.com/sebastien/functionsmixins"
SUMMARY     = "Expands @function and @mixin definitions in CSS sources."
DESCRIPTION = """\
A source-to-source expander for CSS-like stylesheets that replaces custom
`@function` calls and `@apply` mixin applications by standard CSS.
"""
LONG_DESCRIPTION  = None
if os.path.exists("README.md"):
	LONG_DESCRIPTION = open("README.md").read()

VERSION = eval([_.rsplit("=",1)[1] for _ in open("src/functionsmixins/__init__.py").readlines() if _.startswith("VERSION")][0])

setup(
	name             = NAME,
	version          = VERSION,
	description      = DESCRIPTION,
	long_description = LONG_DESCRIPTION,
	author           = "Sébastien Pierre",
	author_email     = "sebastien.pierre@gmail.com",
	url              =  WEBSITE,
	download_url     =  WEBSITE + "/%s-%s.tar.gz" % (NAME.lower(), VERSION) ,
	keywords         = ["css", "pre-processor", "mixins", "functions"],
	install_requires = [],
	extras_require   = {"test": ["pytest"]},
	python_requires  = ">=3.7",
	packages         = ["functionsmixins"],
	package_dir      = {"functionsmixins":"src/functionsmixins"},
	scripts          = ["bin/functionsmixins"],
	license          = "License :: OSI Approved :: BSD License",
	# SEE: https://pypi.python.org/pypi?%3Aaction=list_classifiers
	classifiers      = [
		"Programming Language :: Python",
		"Programming Language :: Python :: 3",
		"Development Status :: 3 - Alpha",
		"Natural Language :: English",
		"Environment :: Console",
		"Intended Audience :: Developers",
		"Operating System :: OS Independent",
		"Topic :: Utilities"
	],
)

# EOF - vim: ts=4 sw=4 noet
