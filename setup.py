"""
Conneg
======

HTTP `Accept` header parsing and content negotiation, for use with Werkzeug.
"""
from setuptools import setup, find_packages

extras_require = {
    'testing': [
        'pytest',
    ],
}

setup(
    name='conneg',
    version='0.1.0',
    license='BSD',
    author='Ben Mather',
    author_email='bwhmather@bwhmather.com',
    description='HTTP content negotiation based on Werkzeug',
    long_description=__doc__,
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
    platforms='any',
    python_requires='>=3.8',
    install_requires=[
        'werkzeug >= 2.0',
    ],
    extras_require=extras_require,
    packages=find_packages(),
    include_package_data=True,
)
