"""dataface: copy UI components from the Dataface registry into your project.

Import from submodules:
- core.registry: registry loading and component lookup
- core.fetcher: component source retrieval
- core.transform: source rewriting for the target project
- core.installer: writing files and installing packages
"""
