"""
This package contains the conversion pipelines and the batch runner.

A pipeline discovers the files of one asset root and applies every target of
its media kind to each of them, strictly one encode at a time. The batch
runner sequences the image and video pipelines and turns their outcome into a
single success or failure.
"""
