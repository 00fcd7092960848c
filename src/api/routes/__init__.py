"""HTTP routes, one router per concern.

- **planets**: Planet lookup by id
- **pages**: Landing page and API descriptor
- **system**: Host information and orchestration probes
"""
