"""Customer DRF serializers.

These describe the HTTP contract for the OpenAPI schema
(drf-spectacular).  Request parsing goes through ``RegisterCustomerDTO``
and validation through the domain, so the serializers never validate
business rules themselves.
"""

from __future__ import annotations

from rest_framework import serializers


class CustomerRequestSerializer(serializers.Serializer):
    name = serializers.CharField(allow_null=True)
    email = serializers.CharField(
        allow_null=True, allow_blank=True, required=False
    )
    cpf = serializers.CharField(
        allow_null=True, help_text="11 digits, with or without dots and dash."
    )


class CustomerResponseSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()
    email = serializers.CharField(allow_blank=True)
    cpf = serializers.CharField(min_length=11, max_length=11)


class ErrorResponseSerializer(serializers.Serializer):
    timestamp = serializers.DateTimeField()
    status = serializers.IntegerField()
    error = serializers.CharField()
