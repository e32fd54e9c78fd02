import logging
from typing import Any

from fxbridge.api.base import HostAPI, HostAPIError
from fxbridge.core.models import ClipSelection, HostKind, ImportResult, Placement

logger = logging.getLogger(__name__)


class AfterEffectsHost(HostAPI):
    """Composition host: compositions, layers, footage items.

    New layers are added at native size. There is no audio cleanup or
    scale-to-frame step for this host.
    """

    kind = HostKind.AFTER_EFFECTS
    label = "After Effects"

    def _is_instance(self, item: Any, class_name: str, type_name: str) -> bool:
        host_class = self.env.lookup(class_name) if self.env.has(class_name) else None
        if isinstance(host_class, type):
            return isinstance(item, host_class)
        return getattr(item, "typeName", None) == type_name

    def _is_composition(self, item: Any) -> bool:
        return self._is_instance(item, "CompItem", "Composition")

    def _source_path(self, source: Any) -> str:
        if source is None or not self._is_instance(source, "FootageItem", "Footage"):
            return ""
        source_file = getattr(source, "file", None)
        if not source_file:
            return ""
        return str(source_file.fsName)

    def _active_composition(self, message: str = "No active composition") -> Any:
        comp = self._app().project.activeItem
        if not comp or not self._is_composition(comp):
            raise HostAPIError("NO_CONTEXT", message)
        return comp

    def _locate(self) -> ClipSelection:
        comp = self._app().project.activeItem
        if not comp:
            raise HostAPIError("NO_CONTEXT", "No composition is open. Please open a composition first.")
        if not self._is_composition(comp):
            raise HostAPIError(
                "NO_CONTEXT", "Please select a composition (not a footage item) in the project panel."
            )
        selected = comp.selectedLayers
        if not selected or len(selected) == 0:
            raise HostAPIError("NO_SELECTION", "No layer selected. Please select a layer in the timeline.")
        layer = selected[0]
        in_point = float(layer.inPoint)
        out_point = float(layer.outPoint)
        return ClipSelection(
            name=str(layer.name),
            duration=out_point - in_point,
            in_point=in_point,
            out_point=out_point,
            start_time=float(layer.startTime),
            end_time=out_point,
            playhead_time=float(comp.time),
            host=self.kind,
            media_path=self._source_path(layer.source),
            layer_index=int(layer.index),
        )

    def _import(self, output_path: str) -> Any:
        import_options = self.env.lookup("ImportOptions")(self.env.lookup("File")(output_path))
        item = self._app().project.importFile(import_options)
        if not item:
            raise HostAPIError("HOST_ERROR", "Failed to import file")
        return item

    def _import_and_place(self, output_path: str, selection: ClipSelection) -> ImportResult:
        self._require_output(output_path)
        comp = self._active_composition()
        item = self._import(output_path)
        layer = comp.layers.add(item)
        layer.startTime = selection.in_point
        if selection.layer_index:
            # layers.add() inserts at index 1, pushing the original layer down one
            original_index = selection.layer_index + 1
            if original_index <= comp.numLayers:
                layer.moveAfter(comp.layers[original_index])
            else:
                logger.debug("original layer %d no longer exists; leaving new layer on top", selection.layer_index)
        return ImportResult.placed(
            self.kind,
            str(item.name),
            Placement(layer_index=int(layer.index), insert_time=float(layer.startTime)),
        )

    def _import_standalone(self, output_path: str) -> ImportResult:
        self._require_output(output_path)
        comp = self._active_composition("No active composition. Open a composition first.")
        item = self._import(output_path)
        layer = comp.layers.add(item)
        layer.startTime = comp.time
        return ImportResult.placed(
            self.kind,
            str(item.name),
            Placement(layer_index=int(layer.index), insert_time=float(layer.startTime)),
        )
