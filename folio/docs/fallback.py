"""Bundled documentation served when neither the network nor the disk cache
can supply a copy. Never cached."""

from folio.types import DocumentKind

FALLBACK_NOTE = "Note: This is fallback content. Official documentation may be temporarily unavailable."

STANDARD_FALLBACK = f"""# Vendure E-commerce Framework

Vendure is a headless e-commerce framework built with TypeScript and Node.js.

## Core Concepts

### Project Structure
- **Entities**: Custom database entities (*.entity.ts)
- **Services**: Business logic services (*.service.ts)
- **Plugins**: Modular extensions (*.plugin.ts)
- **Migrations**: Database schema changes
- **Configuration**: vendure-config.ts

### CLI Commands
- **vendure add**: Add plugins, entities, services and other components
- **vendure migrate**: Run database migrations

### Plugin System
Plugins extend Vendure with new GraphQL schema, services and entities, and are
the integration point for payment providers, shipping methods and custom fields.

### Database Support
- PostgreSQL (recommended)
- MySQL/MariaDB
- SQLite (development)

## Documentation Links

- Main Documentation: https://docs.vendure.io/
- Plugin Development: https://docs.vendure.io/guides/developer-guide/plugins/
- CLI Guide: https://docs.vendure.io/guides/developer-guide/cli/
- API Reference: https://docs.vendure.io/reference/

{FALLBACK_NOTE}"""

FULL_FALLBACK = f"""# Vendure E-commerce Framework - Complete Reference

Vendure is a headless, GraphQL-first e-commerce framework built with TypeScript and Node.js.

## Architecture Overview

### Core Components
- **Admin UI**: Administration interface
- **Shop API**: Customer-facing GraphQL API
- **Admin API**: Administration GraphQL API
- **Worker**: Background job processing
- **Plugin System**: Extensible architecture

### Technology Stack
- TypeScript/Node.js backend
- GraphQL APIs
- PostgreSQL, MySQL or SQLite via TypeORM

## CLI Commands Reference

### vendure add
- `vendure add plugin`: Add a new plugin
- `vendure add entity`: Add a custom entity
- `vendure add service`: Add a new service
- `vendure add job-queue`: Add job queue functionality

### vendure migrate
- `vendure migrate`: Run pending migrations
- `vendure migrate:revert`: Revert the last migration
- `vendure migrate:generate`: Generate a new migration

## Documentation Resources

- Official Documentation: https://docs.vendure.io/
- Developer Guide: https://docs.vendure.io/guides/developer-guide/
- Shop API Schema: https://docs.vendure.io/graphql-api/shop/
- Admin API Schema: https://docs.vendure.io/graphql-api/admin/
- GitHub Repository: https://github.com/vendure-ecommerce/vendure

{FALLBACK_NOTE}"""

_FALLBACKS = {
	DocumentKind.STANDARD: STANDARD_FALLBACK,
	DocumentKind.FULL: FULL_FALLBACK,
}


def fallback_content(kind: DocumentKind) -> str:
	"""Get the bundled text for a document kind."""
	return _FALLBACKS[kind]
