"""
cdnsync: build asset publishing to the CDN bucket + locale bundle resolution.
"""
