"""HTML page with the canvas, controls and a thin socket client."""

from __future__ import annotations

from string import Template

from cobrinha.config import GameConfig

_PAGE = Template("""<!doctype html>
<html lang="pt-BR">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Cobrinha</title>
<style>
  body { background: #0f172a; color: #e2e8f0; font-family: sans-serif;
         display: flex; flex-direction: column; align-items: center; }
  canvas { background: #111827; border-radius: 8px; touch-action: none; }
  .hud, .controls { margin: 8px 0; display: flex; gap: 12px; align-items: center; }
</style>
</head>
<body>
<div class="hud">
  <span>Placar: <b id="score">0</b></span>
  <span>Recorde: <b id="best">0</b></span>
</div>
<canvas id="gameCanvas" width="$canvas_width" height="$canvas_height"></canvas>
<div class="controls">
  <button id="startBtn">Iniciar</button>
  <button id="pauseBtn">Pausar/Continuar</button>
  <button id="resetBtn">Reiniciar</button>
  <label>Velocidade
    <input id="speed" type="range" min="$min_speed" max="$max_speed" value="$speed">
  </label>
</div>
<script>
(() => {
  const canvas = document.getElementById('gameCanvas');
  const ctx = canvas.getContext('2d');
  const scoreEl = document.getElementById('score');
  const bestEl = document.getElementById('best');
  const proto = location.protocol === 'https:' ? 'wss' : 'ws';
  const ws = new WebSocket(proto + '://' + location.host + '/play');
  const send = msg => { if (ws.readyState === 1) ws.send(JSON.stringify(msg)); };

  function replay(ops) {
    for (const op of ops) {
      if (op.op === 'clear') {
        ctx.clearRect(0, 0, canvas.width, canvas.height);
      } else if (op.op === 'line') {
        ctx.strokeStyle = op.color; ctx.lineWidth = 1;
        ctx.beginPath(); ctx.moveTo(op.from[0], op.from[1]);
        ctx.lineTo(op.to[0], op.to[1]); ctx.stroke();
      } else if (op.op === 'rect') {
        ctx.fillStyle = op.color; ctx.fillRect(op.x, op.y, op.w, op.h);
      }
    }
  }

  ws.onmessage = e => {
    const msg = JSON.parse(e.data);
    if (msg.type === 'frame') {
      replay(msg.ops);
      scoreEl.textContent = msg.score;
      bestEl.textContent = msg.best;
    } else if (msg.type === 'game_over') {
      bestEl.textContent = msg.best;
      setTimeout(() => alert('Fim de jogo! Placar: ' + msg.score), 20);
    }
  };

  document.addEventListener('keydown', e => {
    if (e.key === ' ') e.preventDefault();
    send({type: 'key', key: e.key});
  });
  canvas.addEventListener('touchstart', e => {
    const t = e.touches[0];
    send({type: 'touchstart', x: t.clientX, y: t.clientY});
  }, {passive: true});
  canvas.addEventListener('touchend', e => {
    const t = e.changedTouches[0];
    send({type: 'touchend', x: t.clientX, y: t.clientY});
  }, {passive: true});

  document.getElementById('startBtn').onclick = () => send({type: 'start'});
  document.getElementById('pauseBtn').onclick = () => send({type: 'toggle'});
  document.getElementById('resetBtn').onclick = () => send({type: 'reset'});
  const speed = document.getElementById('speed');
  speed.addEventListener('input', () => send({type: 'speed', value: parseInt(speed.value, 10)}));
})();
</script>
</body>
</html>
""")


def render_page(config: GameConfig) -> str:
    """Return the game page sized for *config*."""
    return _PAGE.substitute(
        canvas_width=config.canvas_width,
        canvas_height=config.canvas_height,
        min_speed=config.min_speed,
        max_speed=config.max_speed,
        speed=config.speed,
    )
