"""
Scene logic independent of any rendering backend: scales, styles, the drawing
surface contract, reconciliation and hover interaction.
"""
from emotionmap.scene.scale import DOMAIN, LinearScale, PlotGeometry
from emotionmap.scene.reconciler import ReconcileResult, SceneReconciler
from emotionmap.scene.interaction import DetailPayload, HighlightCommand, InteractionController
