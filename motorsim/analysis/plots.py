
import matplotlib.pyplot as plt
def plot_timeseries(df, path_prefix):
    x = df['t'] if 't' in df else df['cycle']
    xlabel = 't [s]' if 't' in df else 'cycle'
    paths = []
    plt.figure(); plt.plot(x, df['actual_speed'], label='actual'); plt.plot(x, df['target_speed'], '--', label='target')
    plt.xlabel(xlabel); plt.ylabel('speed'); plt.legend()
    paths.append(path_prefix+'_speed.png'); plt.savefig(paths[-1], dpi=150, bbox_inches='tight'); plt.close()
    plt.figure(); plt.plot(x, df['error']); plt.xlabel(xlabel); plt.ylabel('error')
    paths.append(path_prefix+'_error.png'); plt.savefig(paths[-1], dpi=150, bbox_inches='tight'); plt.close()
    plt.figure(); plt.plot(x, df['control_signal']); plt.xlabel(xlabel); plt.ylabel('control_signal')
    paths.append(path_prefix+'_control.png'); plt.savefig(paths[-1], dpi=150, bbox_inches='tight'); plt.close()
    return paths
