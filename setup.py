# !/usr/bin/env python

from setuptools import setup, find_packages

setup(
    name='mailchimp-api',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
      'marshmallow>=3.13',
      'attrs',
      'requests',
      'urllib3>=1.26',
      'python-dotenv',
    ],
    extras_require={
        'tests': ['pytest', 'responses'],
    },
    python_requires='>=3.8',
    version='0.1.0',
    description='Mailchimp Marketing API client for Python',
    license='BSD',
    keywords=['email', 'mailchimp', 'marketing'],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'License :: OSI Approved :: BSD License',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: Implementation :: CPython',
        'Topic :: Communications :: Email',
        'Topic :: Software Development :: Libraries',
    ],
)
