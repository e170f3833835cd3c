'''
Changelog Collector

Collects all published releases of a GitHub repository and renders them into one markdown
document (newest release first).

Release bodies are cleaned of the auto-generated "New Contributors" section and of
"Full Changelog" compare-links. Releases may be restricted to a version range, where bounds
may be given with arbitrary precision (e.g. `8` includes all of `8.x.y`).
'''
