"""Prisma integration: schema file management and the command-line toolchain."""

from nuxtrails.prisma.schema import SchemaWriter
from nuxtrails.prisma.toolchain import PrismaToolchain

__all__ = [
    "PrismaToolchain",
    "SchemaWriter",
]
