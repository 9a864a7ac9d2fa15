"""
Configuration Package for the Asset Converter.

All conversion parameters are static: the input/output roots, the image
quality levels and the video codec profiles are declared here as data so the
pipelines can stay generic. The only runtime input is the optional
`config.user.yaml` file read by `common.py`.
"""
