"""
saas_starter.templates - Bundled Starter Trees
==============================================

Each subdirectory of this package is one template, named after its
``TemplateId`` value. Trees are copied verbatim into the new project;
only the ``name`` field of the root ``package.json`` is rewritten.

Available Templates
-------------------
    minimal/     - Next.js app with a single landing page
    ecommerce/   - Next.js app with a product catalogue and cart page

The ``analytics`` template is listed in the prompt but has no tree yet.
"""

from pathlib import Path

TEMPLATES_DIR = Path(__file__).parent
