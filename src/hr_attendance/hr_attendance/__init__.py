"""HR attendance package.

Builds monthly attendance summaries from the clocking-device punch log,
organized by feature modules (attendance, employees, settings, auth) with a
thin Flask controller layer over service/repository layers.
"""
