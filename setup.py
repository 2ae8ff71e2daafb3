"""Install the submission status package."""

from setuptools import setup, find_packages

setup(
    name='pass-submission-status',
    version='0.1.0',
    packages=find_packages(include=['submission_status',
                                    'submission_status.*']),
    zip_safe=False,
    python_requires='>=3.6',
    install_requires=[
        'arxiv-base>=0.16.6',
        'flask>=1.1,<2',
        'werkzeug<2',
        'jinja2<3',
        'markupsafe<2.1',
        'itsdangerous<2',
        'python-dateutil',
        'pytz',
        'dataclasses; python_version < "3.7"',
    ],
    extras_require={
        'test': ['pytest'],
    },
    include_package_data=True
)
