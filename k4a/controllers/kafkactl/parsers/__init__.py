"""Parsers for kafkactl output."""

from k4a.controllers.kafkactl.parsers.yaml_parser import parse_yaml_documents, split_documents

__all__ = ["parse_yaml_documents", "split_documents"]
