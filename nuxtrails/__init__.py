"""nuxtrails -- Rails-style generators for Nuxt + Prisma + Pinia applications.

Commands:

- ``init prisma``            -- install Prisma and write a SQLite schema.
- ``generate model <name>``  -- schema block, migration, API routes, store,
  pages and components for one model.
- ``new <project>``          -- bootstrap a new Nuxt application.
"""

__version__ = "0.1.0"
