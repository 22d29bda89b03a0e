"""Entry package for the resume builder service.

The application is assembled in `resume_builder.app.main.create_app`, which wires
the API routers, the exception handlers and the resume count cache together.

Notes:
    1. This module does not contain any functions or classes of its own.
    2. Configuration lives in `app.core.config`, persistence in `app.database`
       and `app.models`, and the generation pipeline in `app.llm`.
    3. No disk, network, or database access occurs in this module directly.

"""
