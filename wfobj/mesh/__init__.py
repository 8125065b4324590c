from wfobj.mesh.builder import MeshBuilder, ObjMesh, resolve_index

__all__ = ["MeshBuilder", "ObjMesh", "resolve_index"]
