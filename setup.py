import re
import os.path

from setuptools import setup, find_packages


with open(
    os.path.join(os.path.dirname(__file__), 'gqlhttp', '__init__.py')
) as f:
    VERSION = re.match(r".*__version__ = '(.*?)'", f.read(), re.S).group(1)

with open(
    os.path.join(os.path.dirname(__file__), 'README.rst')
) as f:
    DESCRIPTION = f.read()

setup(
    name='gqlhttp',
    version=VERSION,
    description='HTTP handler serving GraphQL schemas',
    long_description=DESCRIPTION,
    long_description_content_type='text/x-rst',
    packages=find_packages(exclude=['test*', 'examples*', 'docs*']),
    package_data={'gqlhttp.console': ['assets/*.html']},
    include_package_data=True,
    license='BSD-3-Clause',
    python_requires='>=3.10',
    install_requires=[
        'graphql-core>=3.2',
        'werkzeug>=2.3',
    ],
    extras_require={
        'prometheus': ['prometheus-client'],
        'examples': ['flask', 'prometheus-client'],
        'tests': ['pytest', 'prometheus-client'],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Internet :: WWW/HTTP :: WSGI :: Application',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
