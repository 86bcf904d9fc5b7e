"""Components layer - domain logic modules.

This layer contains the view engine itself:
- Regular tag-hierarchy matching
- Custom view / custom tag rule tables
- View membership resolution and view enumeration

Components are leaf modules that:
- Do NOT import services, workflows, or interfaces
- ARE imported and used BY workflows and services
- May import from: helpers, other components

Architecture:
- helpers/ = stdlib-only utilities (pure, stateless)
- components/ = domain logic building blocks (this layer)
- persistence/ = vault access
- workflows/ = orchestration of components + vault
- services/ = config, wiring, long-lived state
- interfaces/ = HTTP/CLI presentation
"""
