"""Publish a signing public key and get back a shareable permanent link."""
