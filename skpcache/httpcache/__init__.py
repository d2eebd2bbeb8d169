"""HTTP caching primitives: Cache-Control parsing, caching policy and storable responses."""